# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Property-based tests for the binary search tree."""

from hypothesis import given, strategies as st

from genro_ordered_tree import OrderedTree, insert, is_ordered, search, traverse_inorder

values_lists = st.lists(st.integers(), max_size=200)


def build(values):
    root = None
    for value in values:
        root = insert(root, value)
    return root


def inorder(root):
    result = []
    traverse_inorder(root, result.append)
    return result


@given(values_lists)
def test_search_tree_property(xs):
    assert is_ordered(build(xs))


@given(values_lists)
def test_inorder_is_sorted_distinct(xs):
    assert inorder(build(xs)) == sorted(set(xs))


@given(values_lists, st.data())
def test_reinsert_changes_nothing(xs, data):
    root = build(xs)
    before = inorder(root)
    if xs:
        root = insert(root, data.draw(st.sampled_from(xs)))
    assert inorder(root) == before


@given(values_lists, st.lists(st.integers(), max_size=50))
def test_search_finds_exactly_inserted(xs, probes):
    root = build(xs)
    for value in xs:
        node = search(root, value)
        assert node is not None
        assert node.value == value
    for value in probes:
        assert (search(root, value) is not None) == (value in xs)


@given(values_lists)
def test_container_matches_functions(xs):
    tree = OrderedTree(xs)
    assert tree.values() == inorder(build(xs))
    assert len(tree) == len(set(xs))
