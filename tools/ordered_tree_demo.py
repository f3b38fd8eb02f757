#!/usr/bin/env python
# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Demo script for the binary search tree.

The actual driver is in the genro_ordered_tree.demo module.

Usage:
    python tools/ordered_tree_demo.py [values ...] [--search N]

Examples:
    # Reference run: 50 30 70 20 40 60 80, search 40
    python tools/ordered_tree_demo.py

    # Custom values, look up a missing one
    python tools/ordered_tree_demo.py 5 5 5 --search 99
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from genro_ordered_tree.demo import main


if __name__ == '__main__':
    sys.exit(main())
