# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Demo driver for the binary search tree.

Builds a tree from a list of integers, prints its in-order traversal,
searches for one value and tears the tree down.

Usage:
    python -m genro_ordered_tree.demo [values ...] [--search N] [--verbose]

Output with the defaults::

    BST in-order traversal: 20 30 40 50 60 70 80
    Value 40 found in the BST.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from .node import OrderedTreeNode
from .tree import destroy, insert, search, traverse_inorder

DEFAULT_VALUES = [50, 30, 70, 20, 40, 60, 80]
DEFAULT_SEARCH = 40

INORDER_LABEL = "BST in-order traversal: "
FOUND_MESSAGE = "Value {value} found in the BST."
NOT_FOUND_MESSAGE = "Value {value} not found in the BST."


def format_inorder(root: OrderedTreeNode | None) -> str:
    """Return the traversal line, each value followed by a single space."""
    parts: list[str] = []
    traverse_inorder(root, lambda value: parts.append(f"{value} "))
    return INORDER_LABEL + "".join(parts)


def format_search(root: OrderedTreeNode | None, value: Any) -> str:
    """Return the found/not found message for value."""
    if search(root, value) is not None:
        return FOUND_MESSAGE.format(value=value)
    return NOT_FOUND_MESSAGE.format(value=value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Build a binary search tree, print it and search it'
    )
    parser.add_argument('values', nargs='*', type=int, default=DEFAULT_VALUES,
                        help='Integers to insert, in order')
    parser.add_argument('-s', '--search', type=int, default=DEFAULT_SEARCH,
                        help='Value to look up')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log tree operations to stderr')
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    root = None
    for value in args.values:
        root = insert(root, value)

    print(format_inorder(root))
    print(format_search(root, args.search))

    destroy(root)
    return 0


if __name__ == '__main__':
    sys.exit(main())
