from typing import Callable
from pyparsing import (
    CaselessKeyword,
    Combine,
    DelimitedList,
    Literal,
    Opt,
    ParseException,
    ParseResults,
    Word,
    nums,
)
from structlog import get_logger
from avl import avltree as avl, const as k, errors as err, util

_LOGGER = get_logger()

Action = Callable[[avl.AVLTree], str]


def _do_statement(tree: avl.AVLTree, tokens: ParseResults) -> str:
    """entrypoint"""

    return tokens[0](tree)


def _do_insert(tokens: ParseResults) -> Action:
    """insert every key, in the order given"""

    keys = list(tokens)

    def wrapper(tree: avl.AVLTree) -> str:
        for key in keys:
            tree.insert(key)

        return k.OK

    return wrapper


def _do_remove(tokens: ParseResults) -> Action:
    """remove every key, in the order given"""

    keys = list(tokens)

    def wrapper(tree: avl.AVLTree) -> str:
        for key in keys:
            tree.remove(key)

        return k.OK

    return wrapper


def _do_search(tokens: ParseResults) -> Action:
    key = tokens[0]

    def wrapper(tree: avl.AVLTree) -> str:
        return k.FOUND if tree.search(key) else k.NOT_FOUND

    return wrapper


def _do_show(_: ParseResults) -> Action:
    def wrapper(tree: avl.AVLTree) -> str:
        if tree.isempty:
            return k.EMPTY

        keys = " ".join(str(key) for key in util.inorder(tree))
        return f"{keys} (height {tree.height})"

    return wrapper


def _do_destroy(_: ParseResults) -> Action:
    def wrapper(tree: avl.AVLTree) -> str:
        return f"{k.OK} {tree.destroy()}"

    return wrapper


class Query:
    """small statement language over a single tree, for the shell"""

    _key = Combine(Opt(Literal("-")) + Word(nums)).add_parse_action(
        lambda tokens: int(tokens[0])
    )
    _keys = DelimitedList(_key, delim=k.SEPARATOR)
    _insert = (CaselessKeyword(k.INSERT).suppress() + _keys).add_parse_action(
        _do_insert
    )
    _remove = (CaselessKeyword(k.REMOVE).suppress() + _keys).add_parse_action(
        _do_remove
    )
    _search = (CaselessKeyword(k.SEARCH).suppress() + _key).add_parse_action(
        _do_search
    )
    _show = CaselessKeyword(k.SHOW).add_parse_action(_do_show)
    _destroy = CaselessKeyword(k.DESTROY).add_parse_action(_do_destroy)
    _operation = _insert | _remove | _search | _show | _destroy

    def __init__(self, tree: avl.AVLTree):
        self._tree = tree
        self._statement = (
            self._operation + Literal(k.TERMINATOR).suppress()
        ).set_parse_action(self._with_tree(_do_statement))

    def call(self, statement: str) -> str:
        """main entrypoint"""

        logger = _LOGGER.bind(statement=f"{statement!r}")
        logger.debug("query.statement")

        try:
            result = self._statement.parse_string(statement, parse_all=True)[0]
        except ParseException as exc:
            raise err.SyntaxErr(str(exc), lineno=exc.lineno, col=exc.col) from exc

        logger.debug("query.result", result=result)
        return result

    def _with_tree(self, func: Callable) -> Callable:
        """pass tree into actions"""

        def wrapped(tokens: ParseResults):
            return func(self._tree, tokens)

        return wrapped
