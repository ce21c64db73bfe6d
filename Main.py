import time

from DataStructure.Stack import Stack

# Largo de la cadena para la demostración de liberación
TEARDOWN_SIZE = 100_000


def run_lifo_demo():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
        print(f"[Stack] push({value}) -> {stack!r}")

    while True:
        value = stack.pop()
        print(f"[Stack] pop() -> {value!r}")
        if value is None:
            break


def run_peek_demo():
    stack = Stack()
    print(f"[Stack] vacía: peek() -> {stack.peek()!r}, pop() -> {stack.pop()!r}")

    stack.push("a")
    print(f"[Stack] push('a'): peek() -> {stack.peek()!r}, peek() -> {stack.peek()!r}")
    print(f"[Stack] pop() -> {stack.pop()!r}, peek() -> {stack.peek()!r}")


def run_teardown_demo(count: int = TEARDOWN_SIZE):
    stack = Stack()
    for i in range(count):
        stack.push(i)

    start = time.perf_counter()
    del stack
    elapsed = time.perf_counter() - start
    print(f"[Stack] liberados {count} nodos en {elapsed:.3f}s")


def main():
    run_lifo_demo()
    run_peek_demo()
    run_teardown_demo()


if __name__ == "__main__":
    main()
