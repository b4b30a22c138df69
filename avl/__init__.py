from .avltree import AVLTree, Node
from .errors import UnorderableKey, SyntaxErr
from .query import Query

__all__ = ["AVLTree", "Node", "UnorderableKey", "SyntaxErr", "Query"]
