import pytest

from spatialdict.benchmark import IMPLEMENTATIONS, main, run_benchmark
from spatialdict.kdtree import KDPointDict
from spatialdict.morton import MortonPointDict
from spatialdict.pointdict import ListPointDict


@pytest.mark.parametrize("factory", [ListPointDict, MortonPointDict, KDPointDict])
def test_searches_succeed(factory):
    result = run_benchmark(factory, 200, 50, 0.1, 7)
    assert result.size == 200
    assert result.positive_error is None
    assert result.negative_errors == 0


def test_list_has_no_tree_statistics():
    result = run_benchmark(ListPointDict, 100, 10, 0.1, 1)
    assert result.height == 0
    assert result.average_node_depth == 0


def test_tree_statistics_are_consistent():
    result = run_benchmark(KDPointDict, 255, 10, 0.1, 3)
    assert result.average_node_depth <= result.height
    assert result.height >= 7


def test_implementations_agree_on_ball_sizes():
    sizes = {
        name: run_benchmark(factory, 300, 40, 0.15, 11).average_ball_size
        for name, factory in IMPLEMENTATIONS.items()
    }
    assert sizes["bst"] == pytest.approx(sizes["list"])
    assert sizes["bst2d"] == pytest.approx(sizes["list"])


def test_large_radius_covers_all_points():
    result = run_benchmark(MortonPointDict, 80, 20, 2.0, 5)
    assert result.average_ball_size == pytest.approx(80)


def test_same_seed_is_deterministic():
    first = run_benchmark(ListPointDict, 100, 30, 0.2, 9)
    second = run_benchmark(ListPointDict, 100, 30, 0.2, 9)
    assert first.average_ball_size == second.average_ball_size


def test_no_searches_gives_zero_average():
    result = run_benchmark(KDPointDict, 10, 0, 0.5, 2)
    assert result.average_ball_size == 0


def test_rejects_empty_dictionary():
    with pytest.raises(ValueError):
        run_benchmark(ListPointDict, 0, 10, 0.1, 1)


def test_report_mentions_sizes():
    result = run_benchmark(ListPointDict, 20, 5, 0.1, 1)
    report = result.report()
    assert "(Size:20, height=0, average node depth=0)" in report
    assert "Testing ball searches:" in report


def test_main_prints_report(capsys):
    assert main(["50", "20", "0.1", "--structure", "bst2d"]) == 0
    out = capsys.readouterr().out
    assert "Testing exact searches:" in out
    assert "Size:50" in out
    assert "Warning" not in out


def test_main_rejects_zero_points():
    with pytest.raises(SystemExit):
        main(["0", "5", "0.1"])