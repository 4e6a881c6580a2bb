from typing import TypeVar, Generic, Iterable, List, Optional, Tuple

T = TypeVar('T')


class EmptyTreeError(ValueError):
    """Raised when reading the smallest or largest value of an empty tree."""


class SearchTree(Generic[T]):
    """Unbalanced binary search tree of distinct, totally ordered values.

    Elements only need ``<`` and ``==``. The shape depends entirely on the
    order of insertion; no rebalancing is ever done.
    """

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['SearchTree.Node'] = None
            self.right: Optional['SearchTree.Node'] = None

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[SearchTree.Node] = None
        self._size: int = 0
        if values is not None:
            for value in values:
                self.add(value)

    @classmethod
    def of(cls, value: T) -> 'SearchTree[T]':
        tree: SearchTree[T] = cls()
        tree._root = SearchTree.Node(value)
        tree._size = 1
        return tree

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> 'SearchTree[T]':
        """Build a tree by adding each value in order.

        Note: Duplicates are skipped, so the size is the number of distinct values.
        """
        return cls(values)

    def add(self, value: T) -> bool:
        if self._root is None:
            self._root = SearchTree.Node(value)
            self._size += 1
            return True

        node = self._root
        while True:
            if value == node.value:
                return False
            if value < node.value:
                if node.left is None:
                    node.left = SearchTree.Node(value)
                    self._size += 1
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = SearchTree.Node(value)
                    self._size += 1
                    return True
                node = node.right

    def remove(self, value: T) -> bool:
        parent: Optional[SearchTree.Node] = None
        node = self._root
        is_left_child = False

        while node is not None and node.value != value:
            parent = node
            if value < node.value:
                node = node.left
                is_left_child = True
            else:
                node = node.right
                is_left_child = False

        if node is None:
            return False

        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            # The successor has no left child, so unlinking it is the
            # single-child case one level down.
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            self._size -= 1
            return True

        if parent is None:
            self._root = replacement
        elif is_left_child:
            parent.left = replacement
        else:
            parent.right = replacement
        self._size -= 1
        return True

    def contains(self, value: T) -> bool:
        return self._find_node(self._root, value) is not None

    def smallest(self) -> T:
        if self._root is None:
            raise EmptyTreeError("smallest from empty tree")
        return self._find_min(self._root).value

    def largest(self) -> T:
        if self._root is None:
            raise EmptyTreeError("largest from empty tree")
        return self._find_max(self._root).value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def count_leaves(self) -> int:
        if self._root is None:
            return 0
        leaves = 0
        stack: List[SearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            if node.left is None and node.right is None:
                leaves += 1
                continue
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return leaves

    def height(self) -> int:
        if self._root is None:
            return 0
        tallest = 0
        stack: List[Tuple[SearchTree.Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            tallest = max(tallest, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return tallest

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[SearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def render(self) -> str:
        return "".join(f"{value} " for value in self.in_order())

    def copy(self) -> 'SearchTree[T]':
        # Re-adding in pre-order reproduces the same shape.
        clone: SearchTree[T] = SearchTree()
        for value in self._pre_order():
            clone.add(value)
        return clone

    def _pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[SearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def _find_node(self, node: Optional[Node], value: T) -> Optional[Node]:
        while node is not None:
            if value == node.value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchTree):
            return NotImplemented
        return self.in_order() == other.in_order()

    def __repr__(self) -> str:
        return f"SearchTree({self.in_order()})"

    def __str__(self) -> str:
        return self.render()
