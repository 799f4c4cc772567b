import logging
from argparse import ArgumentParser

import numpy as np

from orderedtree import OrderedTree

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 40
DEFAULT_UPPER = 100
DEFAULT_INSERTS = (300, 400, 500)


def random_array(size, upper=DEFAULT_UPPER, seed=None):
    rng = np.random.default_rng(seed)
    return [int(value) for value in rng.integers(0, upper, size=size)]


def print_traversals(tree, out=print):
    out("level order: {}".format(tree.level_order()))
    out("inorder: {}".format(tree.inorder()))
    out("preorder: {}".format(tree.preorder()))
    out("postorder: {}".format(tree.postorder()))


def run(tree, extra_values=DEFAULT_INSERTS, out=print):
    out("balanced: {}".format(tree.is_balanced()))
    print_traversals(tree, out)

    for value in extra_values:
        tree.insert(value)
    logger.debug("inserted %s, height is now %d", list(extra_values), tree.height())

    out("balanced after inserts: {}".format(tree.is_balanced()))
    tree.rebalance()
    out("balanced after rebalance: {}".format(tree.is_balanced()))
    print_traversals(tree, out)

    rendered = tree.render()
    if rendered:
        out(rendered)
    return tree


def make_parser():
    parser = ArgumentParser(description="Build an ordered tree from random keys and exercise it")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--upper", type=int, default=DEFAULT_UPPER)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--insert", type=int, action="append", dest="inserts")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("--size must not be negative")
    if args.upper < 1:
        parser.error("--upper must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    values = random_array(args.size, args.upper, args.seed)
    logger.debug("random keys: %s", values)
    inserts = args.inserts if args.inserts is not None else DEFAULT_INSERTS
    return run(OrderedTree(values), inserts)


if __name__ == "__main__":
    main()
