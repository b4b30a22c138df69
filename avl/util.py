from typing import List, Optional
from avl import avltree as avl, types


def getheight(node: Optional[avl.Node]) -> int:
    """absent subtree is 0"""

    return node.height if node else 0


def getbalance(node: Optional[avl.Node]) -> int:
    """left height minus right height"""

    if not node:
        return 0

    return getheight(node.left) - getheight(node.right)


def inorder(tree: avl.AVLTree[types.T]) -> List[types.T]:
    """keys in order"""

    keys: List[types.T] = []
    _collect(tree.root, keys)
    return keys


def _collect(node: Optional[avl.Node], keys: List) -> None:
    if not node:
        return

    _collect(node.left, keys)
    keys.append(node.key)
    _collect(node.right, keys)


def validate(tree: avl.AVLTree) -> None:
    """
    walk the whole tree and raise AssertionError at the first node that breaks
    ordering, balance, or has a stale cached height
    """

    _validate(tree.root, None, None)


def _validate(node: Optional[avl.Node], low, high) -> int:
    """returns the real height of the subtree"""

    if not node:
        return 0

    if low is not None and not low < node.key:
        raise AssertionError(f"order: {node.key!r} not above {low!r}")
    if high is not None and not node.key < high:
        raise AssertionError(f"order: {node.key!r} not below {high!r}")

    lheight = _validate(node.left, low, node.key)
    rheight = _validate(node.right, node.key, high)

    if abs(lheight - rheight) > 1:
        raise AssertionError(f"balance: {node.key!r} is {lheight - rheight}")

    height = 1 + max(lheight, rheight)

    if node.height != height:
        raise AssertionError(f"height: {node.key!r} says {node.height}, is {height}")

    return height
