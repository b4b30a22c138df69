from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Optional
from structlog import get_logger
from avl import types, errors as err

_LOGGER = get_logger()


@dataclass
class Node(Generic[types.T]):
    """tree nodes"""

    key: types.T
    left: Optional[Node[types.T]] = None
    right: Optional[Node[types.T]] = None
    height: int = 1


class AVLTree(Generic[types.T]):
    """avl tree implementation"""

    root: Optional[Node[types.T]]

    def __init__(self):
        self.root = None

    def __contains__(self, key: types.T) -> bool:
        return self.search(key)

    def __enter__(self) -> AVLTree[types.T]:
        return self

    def __exit__(self, *exc) -> None:
        self.destroy()

    @property
    def isempty(self) -> bool:
        """no root"""

        return self.root is None

    @property
    def height(self) -> int:
        """height of the whole tree, 0 when empty"""

        return self._getheight(self.root)

    def search(self, key: types.T) -> bool:
        """proxy to root node"""

        return self._search(self.root, key) is not None

    def insert(self, key: types.T) -> None:
        """proxy to root node. inserting an existing key does nothing"""

        self.root = self._insert(self.root, key)

    def remove(self, key: types.T) -> None:
        """proxy to root node. removing a missing key does nothing"""

        self.root = self._remove(self.root, key)

    def destroy(self) -> int:
        """release every node children first, return how many were released"""

        released = self._destroy(self.root)
        self.root = None
        _LOGGER.debug("avltree.destroy", released=released)

        return released

    def _compare(self, one: types.T, other: types.T) -> int:
        """simple comparator"""

        try:
            if one < other:
                return -1
            if other < one:
                return 1
        except TypeError as exc:
            raise err.UnorderableKey(f"{one!r} vs {other!r}") from exc

        return 0

    def _search(
        self, root: Optional[Node[types.T]], key: types.T
    ) -> Optional[Node[types.T]]:
        """bst search"""

        while root:
            cmp = self._compare(key, root.key)

            if cmp == 0:
                return root

            root = root.left if cmp < 0 else root.right

        return None

    def _insert(self, root: Optional[Node[types.T]], key: types.T) -> Node[types.T]:
        """bst insert then rebalance if balance factor +/- 2"""

        if not root:
            return Node[types.T](key=key)

        cmp = self._compare(key, root.key)

        if cmp < 0:
            root.left = self._insert(root.left, key)
        elif cmp > 0:
            root.right = self._insert(root.right, key)
        else:
            return root

        self._update(root)
        balance = self._getbalance(root)

        # the new key's side of the child tells straight from zig-zag
        if balance > 1 and root.left:
            if self._compare(key, root.left.key) > 0:
                root.left = self._left_rotate(root.left)

            return self._right_rotate(root)
        if balance < -1 and root.right:
            if self._compare(key, root.right.key) < 0:
                root.right = self._right_rotate(root.right)

            return self._left_rotate(root)

        return root

    def _remove(
        self, root: Optional[Node[types.T]], key: types.T
    ) -> Optional[Node[types.T]]:
        """
        bst delete. a node with two children takes its in-order successor's key
        and the successor is deleted from the right subtree instead. every level
        on the way back up is rebalanced, not just the first
        """

        if not root:
            return None

        cmp = self._compare(key, root.key)

        if cmp < 0:
            root.left = self._remove(root.left, key)
        elif cmp > 0:
            root.right = self._remove(root.right, key)
        elif not root.left or not root.right:
            return root.left or root.right
        else:
            successor = self._minimum(root.right)
            root.key = successor.key
            root.right = self._remove(root.right, successor.key)

        self._update(root)
        balance = self._getbalance(root)

        # child balance can be 0 after a delete
        if balance > 1 and root.left:
            if self._getbalance(root.left) < 0:
                root.left = self._left_rotate(root.left)

            return self._right_rotate(root)
        if balance < -1 and root.right:
            if self._getbalance(root.right) > 0:
                root.right = self._right_rotate(root.right)

            return self._left_rotate(root)

        return root

    def _destroy(self, root: Optional[Node[types.T]]) -> int:
        """post-order teardown"""

        if not root:
            return 0

        released = self._destroy(root.left) + self._destroy(root.right)
        root.left = None
        root.right = None

        return released + 1

    def _minimum(self, node: Node[types.T]) -> Node[types.T]:
        """leftmost node of a subtree"""

        while node.left:
            node = node.left

        return node

    def _left_rotate(self, node: Node[types.T]) -> Node[types.T]:
        """l rotate"""

        right = node.right
        if not right:
            return node
        node.right = right.left
        right.left = node
        self._update(node)
        self._update(right)
        return right

    def _right_rotate(self, node: Node[types.T]) -> Node[types.T]:
        """r rotate"""

        left = node.left
        if not left:
            return node
        node.left = left.right
        left.right = node
        self._update(node)
        self._update(left)
        return left

    def _update(self, node: Node[types.T]) -> None:
        """recompute cached height from the children"""

        node.height = 1 + max(self._getheight(node.left), self._getheight(node.right))

    def _getbalance(self, node: Optional[Node[types.T]]) -> int:
        """left height minus right height"""

        if not node:
            return 0

        return self._getheight(node.left) - self._getheight(node.right)

    def _getheight(self, node: Optional[Node[types.T]]) -> int:
        """helper"""

        if not node:
            return 0

        return node.height
