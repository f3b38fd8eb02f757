# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""OrderedTree node class."""

from __future__ import annotations

from typing import Any


class OrderedTreeNode:
    """A node in a binary search tree.

    Each node has:
    - value: The key, which is also the stored payload (set semantics)
    - left: Subtree of strictly smaller values, or None
    - right: Subtree of strictly greater values, or None

    A node owns its two subtrees. There is no parent reference: new nodes
    are linked by reassigning the subtree returned from ``insert``.

    Example:
        >>> node = OrderedTreeNode(50)
        >>> node.value
        50
        >>> node.is_leaf
        True
    """

    __slots__ = ('value', 'left', 'right')

    def __init__(
        self,
        value: Any,
        left: OrderedTreeNode | None = None,
        right: OrderedTreeNode | None = None,
    ) -> None:
        """Initialize an OrderedTreeNode.

        Args:
            value: The node's key.
            left: Optional left subtree.
            right: Optional right subtree.
        """
        self.value = value
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"OrderedTreeNode({self.value!r})"

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return self.left is None and self.right is None

    @property
    def children(self) -> tuple[OrderedTreeNode | None, OrderedTreeNode | None]:
        """The (left, right) pair of subtrees."""
        return self.left, self.right
