# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""OrderedTree exceptions."""

from __future__ import annotations


class OrderedTreeError(Exception):
    """Base exception for OrderedTree errors."""

    pass


class UnorderableValueError(OrderedTreeError, TypeError):
    """Raised when a value cannot be used as a key in the tree.

    Covers ``None`` (reserved as the empty-subtree marker) and values that
    do not compare with the keys already stored.
    """

    pass


class TreeDestroyedError(OrderedTreeError):
    """Raised when an OrderedTree is used after destroy()."""

    pass
