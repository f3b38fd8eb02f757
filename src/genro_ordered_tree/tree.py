# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Recursive binary search tree operations.

This module holds the functional core of genro-ordered-tree. Every operation
takes the root of a subtree (an OrderedTreeNode, or None for the empty tree)
and recurses on its children:

    - **insert**: recurse on one child, reattach the returned subtree
    - **search**: recurse on the one child matching the comparison
    - **traverse_inorder**: left subtree, visit, right subtree
    - **destroy**: both subtrees first, then unlink the node itself

Growth happens through the return-and-reattach protocol: ``insert`` always
returns the root of the subtree it was given (or a new node when it was
given None), and the caller stores it back::

    root = None
    for value in (50, 30, 70):
        root = insert(root, value)

Recursion depth equals tree height. Inserting already sorted values yields a
degenerate tree of height n, so very long sorted inputs can exceed
``sys.getrecursionlimit()`` and raise RecursionError.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from .exceptions import UnorderableValueError
from .node import OrderedTreeNode

logger = logging.getLogger(__name__)


def _compare(value: Any, key: Any) -> int:
    """Return -1, 0 or 1 as value sorts before, equal to or after key."""
    try:
        if value < key:
            return -1
        if value > key:
            return 1
    except TypeError as exc:
        raise UnorderableValueError(
            f"cannot order {type(value).__name__} value {value!r} "
            f"against {type(key).__name__} key {key!r}"
        ) from exc
    return 0


# ==================== Core API ====================

def create_node(value: Any) -> OrderedTreeNode:
    """Create a detached node with no children.

    Args:
        value: The key for the new node.

    Returns:
        A new OrderedTreeNode.

    Raises:
        UnorderableValueError: If value is None.
    """
    if value is None:
        raise UnorderableValueError("None cannot be stored in an ordered tree")
    logger.debug("creating node %r", value)
    return OrderedTreeNode(value)


def insert(root: OrderedTreeNode | None, value: Any) -> OrderedTreeNode:
    """Insert value into the subtree rooted at root.

    Values equal to an existing key are ignored, so the tree behaves as a set.

    Args:
        root: Root of the subtree, or None for an empty subtree.
        value: The value to insert.

    Returns:
        The root of the subtree after insertion. This is root itself unless
        root was None, in which case it is the newly created node. Callers
        must store the result back in place of root.

    Raises:
        UnorderableValueError: If value is None or does not compare with
            the keys along the insertion path.

    Example:
        >>> root = insert(None, 50)
        >>> root = insert(root, 30)
        >>> root.left.value
        30
    """
    if root is None:
        return create_node(value)

    order = _compare(value, root.value)
    if order < 0:
        root.left = insert(root.left, value)
    elif order > 0:
        root.right = insert(root.right, value)
    else:
        logger.debug("ignoring duplicate value %r", value)

    return root


def search(root: OrderedTreeNode | None, value: Any) -> OrderedTreeNode | None:
    """Find the node holding value.

    Exactly one child is visited per level, so the cost is bounded by the
    height of the tree.

    Args:
        root: Root of the subtree to search, or None.
        value: The value to look for.

    Returns:
        The node whose value equals value, or None if it is not in the tree.
        The node stays owned by the tree; do not use it after destroy().

    Raises:
        UnorderableValueError: If value does not compare with the keys
            along the search path.
    """
    if root is None:
        return None

    order = _compare(value, root.value)
    if order == 0:
        return root
    if order < 0:
        return search(root.left, value)
    return search(root.right, value)


def traverse_inorder(
    root: OrderedTreeNode | None,
    visit: Callable[[Any], Any],
) -> None:
    """Call visit on every value in ascending order.

    Args:
        root: Root of the subtree to walk, or None for no visits.
        visit: Called once per node with the node's value.

    Example:
        >>> traverse_inorder(root, lambda v: print(v, end=' '))
    """
    if root is None:
        return

    traverse_inorder(root.left, visit)
    visit(root.value)
    traverse_inorder(root.right, visit)


def destroy(root: OrderedTreeNode | None) -> None:
    """Tear down the subtree rooted at root.

    Both subtrees are released before root itself is unlinked. Afterwards
    every node of the subtree is a detached leaf, and nodes previously
    returned by search() no longer describe the tree.

    Args:
        root: Root of the subtree to tear down. None is a no-op.
    """
    if root is None:
        return

    destroy(root.left)
    destroy(root.right)
    root.left = None
    root.right = None


# ==================== Inspection ====================

def count(root: OrderedTreeNode | None) -> int:
    """Return the number of nodes in the subtree."""
    if root is None:
        return 0
    return count(root.left) + 1 + count(root.right)


def height(root: OrderedTreeNode | None) -> int:
    """Return the number of levels in the subtree (empty=0, single node=1)."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def is_ordered(
    root: OrderedTreeNode | None,
    _low: Any = None,
    _high: Any = None,
) -> bool:
    """Check that every left key is smaller and every right key greater.

    Args:
        root: Root of the subtree to check.
        _low: Internal use, exclusive lower bound for the subtree.
        _high: Internal use, exclusive upper bound for the subtree.

    Returns:
        True if the whole subtree satisfies the binary search tree property.
    """
    if root is None:
        return True
    if _low is not None and not _low < root.value:
        return False
    if _high is not None and not root.value < _high:
        return False
    return (
        is_ordered(root.left, _low, root.value)
        and is_ordered(root.right, root.value, _high)
    )
