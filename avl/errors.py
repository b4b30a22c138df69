class UnorderableKey(Exception):
    """key can't be compared with the keys already in the tree"""


class SyntaxErr(Exception):
    """statement couldn't be parsed"""

    def __init__(self, msg: str, lineno: int = 1, col: int = 1):
        super().__init__(msg)
        self.lineno = lineno
        self.col = col
