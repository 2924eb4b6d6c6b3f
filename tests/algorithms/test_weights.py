import math

import pytest

from prodgraph.algorithms.weights import edge_weight
from prodgraph.errors import InvalidWeightTypeError, PathSearchError
from prodgraph.graph.strict_multidigraph import StrictMultiDiGraph


@pytest.fixture
def graph():
    g = StrictMultiDiGraph()
    g.add_node("A")
    g.add_node("B")
    return g


def test_float_passes_through(graph):
    e = graph.add_edge("A", "B", weight=0.25)
    assert edge_weight(graph, e) == 0.25


def test_int_widened_to_float(graph):
    e = graph.add_edge("A", "B", weight=3)
    value = edge_weight(graph, e)
    assert value == 3.0
    assert isinstance(value, float)


@pytest.mark.parametrize("bad", ["0.5", None, True, [0.5], {"w": 1}])
def test_non_numeric_rejected(graph, bad):
    e = graph.add_edge("A", "B", weight=bad)
    with pytest.raises(InvalidWeightTypeError) as exc_info:
        edge_weight(graph, e)
    assert exc_info.value.edge == e
    assert exc_info.value.attr == "weight"


def test_missing_attribute_rejected(graph):
    e = graph.add_edge("A", "B", cost=1)
    with pytest.raises(InvalidWeightTypeError) as exc_info:
        edge_weight(graph, e)
    assert exc_info.value.value is None
    assert "weight" in str(exc_info.value)


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_non_finite_rejected_by_default(graph, value):
    e = graph.add_edge("A", "B", weight=value)
    with pytest.raises(InvalidWeightTypeError):
        edge_weight(graph, e)


def test_non_finite_allowed_on_request(graph):
    e = graph.add_edge("A", "B", weight=math.inf)
    assert edge_weight(graph, e, allow_non_finite=True) == math.inf


def test_huge_int_rejected(graph):
    e = graph.add_edge("A", "B", weight=10**400)
    with pytest.raises(InvalidWeightTypeError):
        edge_weight(graph, e)


def test_custom_attribute(graph):
    e = graph.add_edge("A", "B", prob=0.125)
    assert edge_weight(graph, e, "prob") == 0.125


def test_error_hierarchy():
    err = InvalidWeightTypeError(7, "weight", "x")
    assert isinstance(err, PathSearchError)
    assert isinstance(err, ValueError)
    assert "edge 7" in str(err)
