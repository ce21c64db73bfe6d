from typing import Any, Optional


class _Node:
    """Nodo de la pila: un dato y el enlace al siguiente"""

    __slots__ = ("data", "next")

    def __init__(self, data, next_node: Optional["_Node"] = None):
        self.data = data
        self.next = next_node


class Stack:
    """
    Pila (LIFO) sobre una cadena enlazada de nodos.
    La pila es dueña del primer nodo y cada nodo es dueño del siguiente.

    pop() y peek() nunca fallan: con la pila vacía retornan `default`
    (None si no se indica).

    Complejidad: O(1) push/pop/peek, O(n) clear
    """

    def __init__(self):
        self._head: Optional[_Node] = None
        self._size = 0

    def push(self, item) -> None:
        """Agrega item al tope de la pila"""
        # El nuevo nodo toma el head actual como siguiente
        self._head = _Node(item, self._head)
        self._size += 1

    def pop(self, default: Any = None):
        """Extrae y retorna el item del tope, o `default` si está vacía"""
        node = self._head
        if node is None:
            return default

        self._head = node.next
        node.next = None
        self._size -= 1
        return node.data

    def peek(self, default: Any = None):
        """Retorna el item del tope sin extraerlo"""
        if self._head is None:
            return default
        return self._head.data

    def is_empty(self) -> bool:
        """Verifica si la pila está vacía"""
        return self._head is None

    def size(self) -> int:
        """Retorna el tamaño de la pila"""
        return self._size

    def clear(self) -> None:
        """
        Limpia la pila nodo por nodo, del tope hacia el fondo.
        Cada nodo se desenlaza antes de soltarlo para que liberar una cadena
        larga no encadene una liberación dentro de otra.
        """
        node = self._head
        self._head = None
        while node is not None:
            next_node = node.next
            node.next = None
            node = next_node
        self._size = 0

    def __del__(self):
        # getattr: __init__ pudo no haber corrido
        if getattr(self, "_head", None) is not None:
            self.clear()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        if self._head is None:
            return "Stack(size=0)"
        return f"Stack(size={self._size}, top={self._head.data!r})"
