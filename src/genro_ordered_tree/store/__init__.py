# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""OrderedTree package - Owning container for the binary search tree.

Example:
    >>> from genro_ordered_tree import OrderedTree
    >>> tree = OrderedTree([50, 30, 70])
    >>> tree.values()
    [30, 50, 70]
"""

from .core import OrderedTree

__all__ = ["OrderedTree"]
