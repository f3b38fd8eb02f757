# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the demo driver."""

from genro_ordered_tree import insert
from genro_ordered_tree.demo import format_inorder, format_search, main


class TestDemo:
    """Tests for the demo entry point."""

    def test_reference_run(self, capsys):
        """Test default run matches the reference output byte for byte."""
        assert main([]) == 0
        out = capsys.readouterr().out
        assert out == (
            "BST in-order traversal: 20 30 40 50 60 70 80 \n"
            "Value 40 found in the BST.\n"
        )

    def test_not_found(self, capsys):
        """Test the not found message."""
        assert main(['--search', '99']) == 0
        out = capsys.readouterr().out
        assert out.endswith("Value 99 not found in the BST.\n")

    def test_custom_values(self, capsys):
        """Test duplicates collapse in the printed traversal."""
        assert main(['5', '5', '5', '-s', '5']) == 0
        out = capsys.readouterr().out
        assert out == "BST in-order traversal: 5 \nValue 5 found in the BST.\n"

    def test_format_empty(self):
        """Test an empty tree prints only the label."""
        assert format_inorder(None) == "BST in-order traversal: "
        assert format_search(None, 1) == "Value 1 not found in the BST."

    def test_format_single(self):
        """Test trailing space after the last value."""
        assert format_inorder(insert(None, 7)) == "BST in-order traversal: 7 "
