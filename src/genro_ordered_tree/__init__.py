# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-OrderedTree - An unbalanced binary search tree of ordered values.

A small, zero-dependency library providing a set-like binary search tree
with recursive insert, search, in-order traversal and teardown.
"""

__version__ = "0.1.0"

from .exceptions import (
    OrderedTreeError,
    TreeDestroyedError,
    UnorderableValueError,
)
from .node import OrderedTreeNode
from .store import OrderedTree
from .tree import (
    count,
    create_node,
    destroy,
    height,
    insert,
    is_ordered,
    search,
    traverse_inorder,
)

__all__ = [
    # Core classes
    "OrderedTree",
    "OrderedTreeNode",
    # Tree operations
    "create_node",
    "insert",
    "search",
    "traverse_inorder",
    "destroy",
    "count",
    "height",
    "is_ordered",
    # Exceptions
    "OrderedTreeError",
    "UnorderableValueError",
    "TreeDestroyedError",
]
