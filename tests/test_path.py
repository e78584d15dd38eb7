import pytest

from graphsearch.config import PathDisplayConfig
from graphsearch.path import Path


def test_path_defaults():
    """A new path is empty with zero weight and nothing visited."""
    p = Path()
    assert p.is_empty()
    assert len(p) == 0
    assert p.total_weight == 0.0
    assert p.visited == set()
    assert p.start is None
    assert p.target is None
    assert p.edge_count == 0


def test_path_endpoints_and_iteration():
    p = Path(["X", "Y", "Z"], 2.0, {"X", "Y", "Z", "W"})
    assert p.start == "X"
    assert p.target == "Z"
    assert p.edge_count == 2
    assert list(p) == ["X", "Y", "Z"]
    assert len(p) == 3


def test_path_single_vertex():
    p = Path(["A"])
    assert p.start == p.target == "A"
    assert p.edge_count == 0


def test_path_equality_ignores_visited():
    assert Path(["A", "B"], 1.0, {"A", "B"}) == Path(["A", "B"], 1.0, {"A", "B", "C"})
    assert Path(["A", "B"], 1.0) != Path(["A", "B"], 2.0)
    assert Path(["A", "B"]) != Path(["B", "A"])


def test_recalculate_total_weight():
    weights = {("A", "B"): 1.5, ("B", "C"): 2.25}
    p = Path(["A", "B", "C"], total_weight=99.0)

    assert p.recalculate_total_weight(lambda u, v: weights[(u, v)]) == 3.75
    assert p.total_weight == 3.75
    # idempotent
    assert p.recalculate_total_weight(lambda u, v: weights[(u, v)]) == 3.75


def test_recalculate_total_weight_first_vertex_contributes_nothing():
    calls = []

    def weight(u, v):
        calls.append((u, v))
        return 1

    p = Path(["A"], total_weight=5.0)
    assert p.recalculate_total_weight(weight) == 0.0
    assert calls == []

    Path(["A", "B", "C"]).recalculate_total_weight(weight)
    assert calls == [("A", "B"), ("B", "C")]


def test_path_str_short():
    p = Path(["A", "B"], 1.0, {"A", "B", "C"})
    assert str(p) == "Weight=1.00 Length=2 visited=3 (A, B)"


def test_path_str_empty():
    assert str(Path()) == "Weight=0.00 Length=0 visited=0 ()"


def test_path_str_rounds_weight():
    assert str(Path([1], 2.346)).startswith("Weight=2.35 ")


def test_path_str_twenty_vertices_not_elided():
    p = Path(list(range(20)))
    assert "..." not in str(p)
    assert str(p).endswith("(0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16, 17, 18, 19)")


def test_path_str_long_path_elides_middle():
    p = Path(list(range(25)), 0.0, set(range(30)))
    assert str(p) == (
        "Weight=0.00 Length=25 visited=30 "
        "(0, 1, 2, 3, 4, 5, 6, 7, 8, 9, ..., 15, 16, 17, 18, 19, 20, 21, 22, 23, 24)"
    )


def test_path_format_custom_config():
    p = Path(list("ABCDEFG"))
    cfg = PathDisplayConfig(display_cut=2, separator="-", ellipsis="~")
    assert p.format(cfg) == "Weight=0.00 Length=7 visited=0 (A-B-~-F-G)"


def test_path_format_rejects_bad_config():
    with pytest.raises(ValueError):
        Path(["A"]).format(PathDisplayConfig(display_cut=0))
