import logging
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar('T')

Comparator = Callable[[Any, Any], int]

logger = logging.getLogger(__name__)


class InvalidPositionError(ValueError):
    """Raised when a position does not belong to the tree it is used with."""


def natural_order(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


class OrderedTree(Generic[T]):
    """
    Unbalanced binary search tree ordered by an injected comparator.

    Positions handed out by insert/find/predecessor/successor are the tree's
    nodes. A position stays valid until its node is removed or the tree is
    cleared. Deleting an element whose node has two children moves the
    in-order predecessor's element into that node, so the predecessor's
    position is the one invalidated. Read a position's element through
    node.element; it cannot be reassigned from outside the tree.
    """

    class Node:
        def __init__(self, element: T, owner: 'OrderedTree', parent: Optional['OrderedTree.Node'] = None) -> None:
            self._element: T = element
            self.left: Optional['OrderedTree.Node'] = None
            self.right: Optional['OrderedTree.Node'] = None
            # Upward navigation only; ownership runs parent -> child.
            self.parent: Optional['OrderedTree.Node'] = parent
            self.owner: Optional['OrderedTree'] = owner

        @property
        def element(self) -> T:
            return self._element

        def __repr__(self) -> str:
            return f"Node({self.element!r})"

    def __init__(self, comparator: Optional[Comparator] = None) -> None:
        self._compare: Comparator = comparator if comparator is not None else natural_order
        self._root: Optional[OrderedTree.Node] = None
        self._size: int = 0
        # Bumped on every structural change; live in-order iterators check it.
        self._version: int = 0

    def _validate(self, position: Any) -> 'OrderedTree.Node':
        if not isinstance(position, OrderedTree.Node):
            raise InvalidPositionError(f"not a tree position: {position!r}")
        if position.owner is not self:
            raise InvalidPositionError("position does not belong to this tree")
        return position

    def root(self) -> Optional[Node]:
        return self._root

    def parent(self, position: Node) -> Optional[Node]:
        return self._validate(position).parent

    def left(self, position: Node) -> Optional[Node]:
        return self._validate(position).left

    def right(self, position: Node) -> Optional[Node]:
        return self._validate(position).right

    def children(self, position: Node) -> List[Node]:
        node = self._validate(position)
        return [child for child in (node.left, node.right) if child is not None]

    def num_children(self, position: Node) -> int:
        return len(self.children(position))

    def is_root(self, position: Node) -> bool:
        return self._validate(position) is self._root

    def is_leaf(self, position: Node) -> bool:
        return self.num_children(position) == 0

    def is_internal(self, position: Node) -> bool:
        return self.num_children(position) > 0

    def depth(self, position: Node) -> int:
        node = self._validate(position)
        depth = 0
        while node.parent is not None:
            node = node.parent
            depth += 1
        return depth

    def height(self, position: Optional[Node] = None) -> int:
        """
        Number of edges on the longest downward path from position.

        Defaults to the root. A single node and an empty tree both have
        height 0. Walks level by level so degenerate trees do not hit the
        recursion limit.
        """
        if position is None:
            if self._root is None:
                return 0
            position = self._root
        level = [self._validate(position)]
        height = -1
        while level:
            height += 1
            level = [child for node in level for child in (node.left, node.right) if child is not None]
        return height

    def find(self, element: T) -> Optional[Node]:
        node = self._root
        while node is not None:
            cmp = self._compare(element, node.element)
            if cmp < 0:
                node = node.left
            elif cmp > 0:
                node = node.right
            else:
                return node
        return None

    def contains(self, element: T) -> bool:
        return self.find(element) is not None

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._subtree_min(self._root).element

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        return self._subtree_max(self._root).element

    def predecessor(self, position: Optional[Node]) -> Optional[Node]:
        if position is None:
            return None
        node = self._validate(position)
        if node.left is not None:
            return self._subtree_max(node.left)
        parent = node.parent
        while parent is not None and node is parent.left:
            node = parent
            parent = parent.parent
        return parent

    def successor(self, position: Optional[Node]) -> Optional[Node]:
        if position is None:
            return None
        node = self._validate(position)
        if node.right is not None:
            return self._subtree_min(node.right)
        parent = node.parent
        while parent is not None and node is parent.right:
            node = parent
            parent = parent.parent
        return parent

    def insert(self, element: T) -> Optional[Node]:
        """
        Insert element as a new leaf.

        Returns the new position, or None when an equal element is already
        stored (the tree is left unchanged).
        """
        return self.add(self._root, element)

    def add(self, position: Optional[Node], element: T) -> Optional[Node]:
        """
        Insert element, starting the descent at position.

        With position None the tree must be empty and element becomes the
        root. Starting below the root is only allowed for elements that fall
        inside the key range covered by that subtree; anything else raises
        ValueError. Returns None for a duplicate.
        """
        if position is None:
            if self._root is not None:
                raise ValueError("add without a position requires an empty tree")
            self._root = OrderedTree.Node(element, self)
            self._size += 1
            self._version += 1
            logger.debug("inserted %r as root", element)
            return self._root

        node = self._validate(position)
        if node is not self._root and self._matches_ancestor(node, element):
            logger.debug("rejected duplicate %r", element)
            return None

        while True:
            cmp = self._compare(element, node.element)
            if cmp < 0:
                if node.left is None:
                    node.left = OrderedTree.Node(element, self, node)
                    self._size += 1
                    self._version += 1
                    logger.debug("inserted %r left of %r", element, node.element)
                    return node.left
                node = node.left
            elif cmp > 0:
                if node.right is None:
                    node.right = OrderedTree.Node(element, self, node)
                    self._size += 1
                    self._version += 1
                    logger.debug("inserted %r right of %r", element, node.element)
                    return node.right
                node = node.right
            else:
                logger.debug("rejected duplicate %r", element)
                return None

    def delete(self, element: T) -> Optional[T]:
        """Remove element if present and return it; None when absent."""
        node = self.find(element)
        if node is None:
            return None
        return self.remove(node)

    def remove(self, position: Node) -> T:
        """
        Remove the element at position and return it.

        A node with two children keeps its place and takes over its in-order
        predecessor's element; the predecessor's node is spliced out instead.
        """
        node = self._validate(position)
        removed = node.element
        if node.left is not None and node.right is not None:
            pred = self._subtree_max(node.left)
            node._element = pred.element
            self._splice(pred)
        else:
            self._splice(node)
        self._size -= 1
        self._version += 1
        logger.debug("removed %r, size now %d", removed, self._size)
        return removed

    def clear(self) -> None:
        # Detach every node so that outstanding positions are rejected.
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child is not None)
            self._detach(node)
        self._root = None
        self._size = 0
        self._version += 1

    def in_order(self) -> Iterator[T]:
        """Yield elements in ascending order; RuntimeError if the tree changes meanwhile."""
        version = self._version
        stack: List[OrderedTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.element
            if self._version != version:
                raise RuntimeError("tree changed during iteration")
            node = node.right

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def _subtree_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _subtree_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def _splice(self, node: Node) -> None:
        # Only valid for nodes with at most one child.
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self._root = child
        elif node is parent.left:
            parent.left = child
        else:
            parent.right = child
        self._detach(node)

    @staticmethod
    def _detach(node: Node) -> None:
        node.left = node.right = node.parent = None
        node.owner = None

    def _matches_ancestor(self, node: Node, element: T) -> bool:
        """
        Check element against the bounds the ancestors of node impose.

        Returns True when element equals one of the ancestors and raises
        ValueError when it lies outside the subtree's key range.
        """
        child, parent = node, node.parent
        while parent is not None:
            cmp = self._compare(element, parent.element)
            if cmp == 0:
                return True
            if (child is parent.left and cmp > 0) or (child is parent.right and cmp < 0):
                raise ValueError(f"{element!r} is outside the key range of the subtree at {node.element!r}")
            child, parent = parent, parent.parent
        return False

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, element: T) -> bool:
        return self.contains(element)

    def __iter__(self) -> Iterator[T]:
        return self.in_order()

    def __repr__(self) -> str:
        return f"OrderedTree({list(self.in_order())})"

    def __str__(self) -> str:
        return f"OrderedTree(size={self._size})"
