# pylint:disable=redefined-outer-name

from pytest import fixture, mark, raises
from avl import AVLTree, UnorderableKey, util


@fixture
def tree() -> AVLTree[int]:
    """index test subject"""

    return AVLTree[int]()


def _build(*keys: int) -> AVLTree[int]:
    tree = AVLTree[int]()

    for key in keys:
        tree.insert(key)

    return tree


def test_empty(tree: AVLTree[int]):
    assert tree.isempty
    assert tree.height == 0
    assert not tree.search(10)


def test_single_insert(tree: AVLTree[int]):
    tree.insert(10)

    assert tree.search(10)
    assert not tree.search(20)
    assert tree.root
    assert tree.root.height == 1


def test_insert_no_rotation():
    tree = _build(10, 5, 15)

    assert tree.search(5) and tree.search(10) and tree.search(15)
    assert tree.root
    assert tree.root.key == 10
    assert tree.height == 2


@mark.parametrize(
    "keys",
    [(30, 20, 10), (10, 20, 30), (30, 10, 20), (10, 30, 20)],
    ids=["ll", "rr", "lr", "rl"],
)
def test_insert_rotations(keys):
    tree = _build(*keys)

    assert tree.search(10) and tree.search(20) and tree.search(30)
    assert tree.root
    assert tree.root.key == 20
    assert tree.root.left and tree.root.left.key == 10
    assert tree.root.right and tree.root.right.key == 30
    assert util.getbalance(tree.root) == 0
    assert tree.height == 2
    util.validate(tree)


def test_insert_shape():
    tree = _build(10, 20, 30, 40, 50, 25)

    assert tree.root
    assert tree.root.key == 30
    assert tree.root.left
    assert tree.root.left.key == 20
    assert tree.root.left.left
    assert tree.root.left.left.key == 10
    assert tree.root.left.right
    assert tree.root.left.right.key == 25
    assert tree.root.right
    assert tree.root.right.key == 40
    assert tree.root.right.right
    assert tree.root.right.right.key == 50
    assert not tree.search(100)


def test_duplicate_insert():
    tree = _build(10, 5, 15)
    before = util.inorder(tree)
    tree.insert(5)

    assert util.inorder(tree) == before
    assert tree.height == 2


def test_remove_leaf_one_child_two_children():
    tree = _build(10, 5, 15, 3, 7, 12, 17)

    tree.remove(3)
    assert not tree.search(3) and tree.search(5)

    tree.remove(5)
    assert not tree.search(5) and tree.search(7) and tree.search(10)

    tree.remove(10)
    assert not tree.search(10) and tree.search(12) and tree.search(15)
    assert util.inorder(tree) == [7, 12, 15, 17]
    util.validate(tree)


def test_remove_two_children_copies_successor():
    tree = _build(10, 5, 15, 12, 17)
    root = tree.root
    tree.remove(10)

    assert tree.root is root
    assert tree.root.key == 12


def test_remove_rebalances():
    tree = _build(20, 10, 30, 5)
    tree.remove(30)

    assert not tree.search(30)
    assert tree.search(5) and tree.search(10) and tree.search(20)
    assert tree.root
    assert tree.root.key == 10
    assert util.getbalance(tree.root) == 0
    assert util.getheight(tree.root.right) == 1
    util.validate(tree)


def test_remove_zig_zag_rebalances():
    tree = _build(20, 10, 30, 15)
    tree.remove(30)

    assert tree.root
    assert tree.root.key == 15
    assert util.inorder(tree) == [10, 15, 20]
    util.validate(tree)


def test_remove_rebalances_more_than_one_level():
    tree = _build(8, 5, 11, 3, 7, 10, 12, 2, 4, 6, 9, 1)
    util.validate(tree)
    tree.remove(12)

    assert util.inorder(tree) == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11]
    util.validate(tree)


def test_remove_missing():
    tree = _build(10)
    tree.remove(100)

    assert tree.search(10)
    assert tree.height == 1


def test_remove_from_empty(tree: AVLTree[int]):
    tree.remove(1)

    assert tree.isempty


def test_remove_last(tree: AVLTree[int]):
    tree.insert(1)
    tree.remove(1)

    assert tree.isempty
    assert not tree.search(1)


def test_destroy():
    tree = _build(10, 20, 30, 40, 50, 25)
    root = tree.root

    assert tree.destroy() == 6
    assert tree.isempty
    assert root and not root.left and not root.right
    assert tree.destroy() == 0


def test_context_manager():
    with AVLTree[int]() as tree:
        tree.insert(1)
        tree.insert(2)

    assert tree.isempty


def test_contains():
    tree = _build(1, 2, 3)

    assert 2 in tree
    assert 4 not in tree


def test_strings():
    tree = AVLTree[str]()

    for word in ["pear", "apple", "fig", "kiwi", "banana"]:
        tree.insert(word)

    assert util.inorder(tree) == ["apple", "banana", "fig", "kiwi", "pear"]
    assert tree.search("fig")
    assert not tree.search("grape")
    util.validate(tree)


def test_tuples():
    tree = AVLTree()
    tree.insert((b"b", 1))
    tree.insert((b"a", 2))
    tree.insert((b"a", 1))

    assert util.inorder(tree) == [(b"a", 1), (b"a", 2), (b"b", 1)]


def test_unorderable():
    tree = _build(1, 2, 3)

    with raises(UnorderableKey):
        tree.insert("a")

    with raises(UnorderableKey):
        tree.search("a")

    with raises(UnorderableKey):
        tree.remove("a")

    assert util.inorder(tree) == [1, 2, 3]
    util.validate(tree)


def test_sequential_height():
    tree = _build(*range(1, 1024))

    assert tree.height == 10
    util.validate(tree)
