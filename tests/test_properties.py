"""Property-based tests for the ordered tree, checked against SortedList."""

import math

from hypothesis import given, settings, strategies as st
from sortedcontainers import SortedList

from pybst.tree import OrderedTree

# Below DEGENERATE_WARN_SIZE so sorted draws never warn
keys = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)

# (is_add, key) pairs
operations = st.lists(
    st.tuples(st.booleans(), st.integers(min_value=-50, max_value=50)),
    max_size=120,
)


def build(xs):
    return OrderedTree(xs)


@given(keys)
def test_inorder_is_sorted_and_unique(xs):
    tree = build(xs)
    out = []
    tree.inorder(out.append)

    assert out == list(SortedList(set(xs)))
    assert list(tree) == out
    assert tree.size() == len(set(xs))
    assert tree.is_valid()


@given(operations)
@settings(max_examples=200)
def test_matches_sorted_list_model(ops):
    tree = OrderedTree()
    model = SortedList()
    for is_add, key in ops:
        if is_add:
            tree.add(key)
            if key not in model:
                model.add(key)
        else:
            before = tree.size()
            tree.remove(key)
            if key in model:
                model.remove(key)
                assert tree.size() == before - 1
            else:
                assert tree.size() == before
            assert not tree.contains(key)

    assert list(tree) == list(model)
    assert tree.is_valid()


@given(keys, st.integers(min_value=-1000, max_value=1000))
def test_removing_absent_element_changes_nothing(xs, key):
    tree = build([x for x in xs if x != key])
    pre, level = [], []
    tree.preorder(pre.append)
    tree.level_order(level.append)
    size = tree.size()

    tree.remove(key)

    pre_after, level_after = [], []
    tree.preorder(pre_after.append)
    tree.level_order(level_after.append)
    assert tree.size() == size
    assert pre_after == pre
    assert level_after == level


@given(keys)
def test_height_bounds(xs):
    tree = build(xs)
    n = tree.size()
    height = tree.height()

    assert math.ceil(math.log2(n + 1)) <= height <= n
    assert height == tree._subtree_height(tree.root())


@given(keys)
def test_successor_and_predecessor_follow_sorted_order(xs):
    tree = build(xs)
    model = SortedList(set(xs))
    for i, key in enumerate(model):
        expected_next = model[i + 1] if i + 1 < len(model) else None
        expected_prev = model[i - 1] if i > 0 else None
        assert tree.successor(key) == expected_next
        assert tree.predecessor(key) == expected_prev


@given(keys)
def test_traversals_visit_every_element_once(xs):
    tree = build(xs)
    for order in ("preorder", "inorder", "postorder", "level_order"):
        out = []
        getattr(tree, order)(out.append)
        assert sorted(out) == list(SortedList(set(xs)))
