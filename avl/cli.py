import logging
import sys
from argparse import ArgumentParser
from typing import Callable, Iterator, List, Optional
import structlog
from structlog import get_logger
from avl import avltree as avl, const as k, errors as err, query as qry

_LOGGER = get_logger()
DEMO_KEYS = [10, 20, 30, 40, 50, 25]


def configure_logging(level: str = "warning") -> None:
    """only let events at or above level through"""

    structlog.configure(
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
    )


def demo(echo: Callable[[str], None] = print) -> avl.AVLTree[int]:
    """fixed walkthrough of insert, search and remove"""

    tree = avl.AVLTree[int]()

    echo("Inserting elements...")
    for key in DEMO_KEYS:
        tree.insert(key)

    for key in [25, 100]:
        echo(f"Searching for {key}: {'Found' if tree.search(key) else 'Not Found'}")

    echo("Deleting 10 (leaf)")
    tree.remove(10)

    return tree


def run(query: qry.Query, statement: str) -> str:
    """execute one statement, turning errors into a response line"""

    try:
        return query.call(statement)
    except err.SyntaxErr as exc:
        _LOGGER.error("cli.syntax_err", error=str(exc))
        return f"{k.SYNTAX_ERR}: ln {exc.lineno}, col {exc.col}"
    except err.UnorderableKey as exc:
        _LOGGER.error("cli.unorderable_key", error=str(exc))
        return f"{k.ERR}: {exc}"


def _prompt(prompt: str) -> Iterator[str]:
    """yield every complete statement, keeping any unterminated tail for later"""

    pending = ""

    while True:
        pending += f"{input(prompt)}\n"
        *statements, pending = pending.split(k.TERMINATOR)

        for statement in statements:
            if statement.strip():
                yield f"{statement}{k.TERMINATOR}"

        if not pending.strip():
            pending = ""


def main(argv: Optional[List[str]] = None) -> None:
    """main entry point"""

    parser = ArgumentParser(description="avl tree shell")
    parser.add_argument("-d", "--demo", help="run the demo", action="store_true")
    parser.add_argument("-q", "--query", help="query", type=str)
    parser.add_argument(
        "-l",
        "--log-level",
        help="log level",
        default="warning",
        choices=k.LOG_LEVELS,
        type=str,
    )
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.demo:
        demo()
        return

    tree = avl.AVLTree[int]()
    query = qry.Query(tree)

    if args.query:
        for statement in args.query.split(k.TERMINATOR):
            if statement.strip():
                print(run(query, f"{statement}{k.TERMINATOR}"))
        return

    try:
        for statement in _prompt("avl> "):
            print(run(query, statement))
    except (KeyboardInterrupt, EOFError):
        pass
    finally:
        tree.destroy()


if __name__ == "__main__":
    main()
