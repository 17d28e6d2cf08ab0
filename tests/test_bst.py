import random

import pytest

from spatialdict.bst import BST


def cmp(a, b):
    return (a > b) - (a < b)


def make_tree(keys):
    tree = BST(cmp)
    for key in keys:
        tree.insert(key, f"v{key}")
    return tree


def test_empty_tree():
    tree = BST(cmp)
    assert len(tree) == 0
    assert tree.height() == 0
    assert tree.average_node_depth() == 0.0
    assert tree.search(1) is None
    assert tree.range_search(0, 10) == []


def test_insert_and_search():
    tree = make_tree([5, 3, 8, 1, 4])
    assert len(tree) == 5
    for key in [5, 3, 8, 1, 4]:
        assert tree.search(key) == f"v{key}"
    assert tree.search(7) is None


def test_single_node_height_zero():
    tree = make_tree([42])
    assert tree.height() == 0
    assert tree.average_node_depth() == 0.0


def test_sorted_insertion_degenerates():
    keys = list(range(10))
    tree = make_tree(keys)
    assert tree.height() == len(keys) - 1


def test_duplicates_are_kept():
    tree = BST(cmp)
    tree.insert(2, "a")
    tree.insert(2, "b")
    tree.insert(2, "c")
    assert len(tree) == 3
    assert tree.search(2) in {"a", "b", "c"}
    assert sorted(tree.range_search(2, 2)) == ["a", "b", "c"]


def test_range_search_is_inclusive_and_ordered():
    keys = [50, 20, 70, 10, 30, 60, 80, 25, 35]
    tree = make_tree(keys)
    expected = [f"v{k}" for k in sorted(keys) if 25 <= k <= 60]
    assert tree.range_search(25, 60) == expected


def test_range_search_outside_returns_empty():
    tree = make_tree([5, 3, 8])
    assert tree.range_search(100, 200) == []
    assert tree.range_search(-10, -1) == []


def test_range_search_random_matches_filter():
    rng = random.Random(7)
    keys = [rng.randint(0, 100) for _ in range(200)]
    tree = BST(cmp)
    for i, key in enumerate(keys):
        tree.insert(key, (key, i))
    found = tree.range_search(20, 40)
    assert sorted(found) == sorted((k, i) for i, k in enumerate(keys) if 20 <= k <= 40)
    assert [k for k, _ in found] == sorted(k for k, _ in found)


def test_average_depth_of_small_tree():
    tree = make_tree([2, 1, 3])
    assert tree.average_node_depth() == pytest.approx(2 / 3)


def test_optimal_build_perfect_tree():
    keys = [4, 2, 6, 1, 3, 5, 7]
    tree = BST.optimal_build(keys, [k * 10 for k in keys], cmp)
    assert len(tree) == 7
    assert tree.height() == 2
    assert tree.average_node_depth() == pytest.approx(10 / 7)


def test_optimal_build_unsorted_input_keeps_pairs():
    rng = random.Random(3)
    keys = list(range(100))
    rng.shuffle(keys)
    tree = BST.optimal_build(keys, [f"v{k}" for k in keys], cmp)
    assert len(tree) == 100
    assert tree.range_search(0, 99) == [f"v{k}" for k in range(100)]
    for key in keys:
        assert tree.search(key) == f"v{key}"


def test_optimal_build_is_shallower_than_sequential():
    keys = list(range(64))
    built = BST.optimal_build(keys, keys, cmp)
    sequential = make_tree(keys)
    assert built.height() < sequential.height()
    assert 2 ** built.height() <= len(built) < 2 ** (built.height() + 1)


def test_optimal_build_then_insert():
    tree = BST.optimal_build([1, 3, 5], ["a", "b", "c"], cmp)
    tree.insert(4, "d")
    assert len(tree) == 4
    assert tree.range_search(3, 5) == ["b", "d", "c"]


def test_optimal_build_empty():
    tree = BST.optimal_build([], [], cmp)
    assert len(tree) == 0
    assert tree.range_search(0, 1) == []


def test_optimal_build_length_mismatch():
    with pytest.raises(ValueError):
        BST.optimal_build([1, 2], ["a"], cmp)