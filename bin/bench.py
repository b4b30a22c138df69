from argparse import ArgumentParser
from random import sample, shuffle
from timeit import timeit
from structlog import get_logger
from avl import AVLTree

LOGGER = get_logger()


def main():
    """fire it up"""

    parser = ArgumentParser()
    parser.add_argument(
        "-z", "--set-size", type=int, help="number of keys to insert", default=100000
    )
    parser.add_argument(
        "-r", "--key-range", type=int, help="keys drawn from [0, r)", default=1 << 32
    )

    args = parser.parse_args()
    tree = AVLTree[int]()
    keys = sample(range(args.key_range), args.set_size)

    LOGGER.info("config", set_size=args.set_size, key_range=args.key_range)

    def insert():
        for key in keys:
            tree.insert(key)

    def search():
        for key in keys:
            tree.search(key)

    def remove():
        for key in keys:
            tree.remove(key)

    elapsed = timeit(insert, number=1)
    LOGGER.info("insert", elapsed=elapsed, height=tree.height)
    shuffle(keys)
    elapsed = timeit(search, number=1)
    LOGGER.info("search", elapsed=elapsed)
    shuffle(keys)
    elapsed = timeit(remove, number=1)
    LOGGER.info("remove", elapsed=elapsed, isempty=tree.isempty)


if __name__ == "__main__":
    main()
