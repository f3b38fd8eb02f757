# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""OrderedTree - An owning container around the recursive tree operations.

The functions in ``genro_ordered_tree.tree`` work on bare node references and
leave it to the caller to store the subtree returned by ``insert``. OrderedTree
holds the root reference, applies that protocol, and refuses to be used once
it has been destroyed.

Example:
    Basic usage::

        tree = OrderedTree([50, 30, 70])
        tree.insert(20).insert(40)

        print(tree.values())     # [20, 30, 40, 50, 70]
        print(40 in tree)        # True
        print(tree.search(99))   # None

        tree.destroy()
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from .. import tree as ops
from ..exceptions import TreeDestroyedError
from ..node import OrderedTreeNode

logger = logging.getLogger(__name__)


class OrderedTree:
    """A set of ordered values stored in an unbalanced binary search tree.

    OrderedTree provides:
    - insert(value): Add a value, ignoring duplicates
    - search(value): Get the node holding a value, or None
    - traverse_inorder(visit): Call visit on each value in ascending order
    - destroy(): Tear down all nodes; the tree is unusable afterwards

    Access is single-threaded. Callers sharing a tree between threads must
    serialize access themselves.

    Attributes:
        root: The root OrderedTreeNode, or None for an empty tree.
    """

    __slots__ = ('root', '_destroyed')

    def __init__(self, source: Iterable[Any] | None = None) -> None:
        """Initialize an OrderedTree.

        Args:
            source: Optional iterable of values, inserted in order.

        Example:
            >>> OrderedTree()
            >>> OrderedTree([50, 30, 70])
        """
        self.root: OrderedTreeNode | None = None
        self._destroyed = False

        if source is not None:
            for value in source:
                self.insert(value)

    def _check_alive(self) -> None:
        if self._destroyed:
            raise TreeDestroyedError("OrderedTree has been destroyed")

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing the values in order."""
        if self._destroyed:
            return "OrderedTree(<destroyed>)"
        return f"OrderedTree({self.values()})"

    def __len__(self) -> int:
        """Return the number of values stored."""
        self._check_alive()
        return ops.count(self.root)

    def __bool__(self) -> bool:
        """True if at least one value is stored."""
        self._check_alive()
        return self.root is not None

    def __contains__(self, value: Any) -> bool:
        """Check if value is stored in the tree."""
        return self.search(value) is not None

    # ==================== Core API ====================

    def insert(self, value: Any) -> OrderedTree:
        """Insert a value. Duplicates are ignored.

        Args:
            value: The value to insert.

        Returns:
            This OrderedTree, for chaining.

        Raises:
            UnorderableValueError: If value is None or does not compare
                with the stored values.
            TreeDestroyedError: If the tree has been destroyed.

        Example:
            >>> tree.insert(50).insert(30).insert(70)
        """
        self._check_alive()
        self.root = ops.insert(self.root, value)
        return self

    def search(self, value: Any) -> OrderedTreeNode | None:
        """Return the node holding value, or None if it is not stored.

        The returned node must not be used after destroy().
        """
        self._check_alive()
        return ops.search(self.root, value)

    def traverse_inorder(self, visit: Callable[[Any], Any]) -> None:
        """Call visit once per value in ascending order."""
        self._check_alive()
        ops.traverse_inorder(self.root, visit)

    def values(self) -> list[Any]:
        """Return all values in ascending order."""
        result: list[Any] = []
        self.traverse_inorder(result.append)
        return result

    def destroy(self) -> None:
        """Tear down every node and mark the tree as destroyed.

        Must be called at most once. Any later call to a method other than
        repr() raises TreeDestroyedError.
        """
        self._check_alive()
        released = ops.count(self.root)
        ops.destroy(self.root)
        self.root = None
        self._destroyed = True
        logger.debug("destroyed tree, released %d nodes", released)

    # ==================== Inspection ====================

    @property
    def height(self) -> int:
        """Number of levels in the tree (empty=0)."""
        self._check_alive()
        return ops.height(self.root)

    @property
    def destroyed(self) -> bool:
        """True once destroy() has been called."""
        return self._destroyed
