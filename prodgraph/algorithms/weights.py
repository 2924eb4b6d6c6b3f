"""Edge weight extraction."""

from __future__ import annotations

import math
from numbers import Integral

from prodgraph.errors import InvalidWeightTypeError
from prodgraph.graph.accessor import EdgeID, GraphAccessor


def edge_weight(
    graph: GraphAccessor,
    edge: EdgeID,
    attr: str = "weight",
    *,
    allow_non_finite: bool = False,
) -> float:
    """Return the weight of `edge` as a float.

    Integer values are widened to float. Booleans are not treated as integers.

    Args:
        graph: Graph that owns the edge.
        edge: Edge identifier.
        attr: Name of the weight attribute.
        allow_non_finite: Accept NaN and infinities instead of rejecting them.

    Returns:
        The weight as a float.

    Raises:
        InvalidWeightTypeError: If the attribute is missing, is not an integer
            or float, or is not finite while `allow_non_finite` is False.
    """
    value = graph.edge_property(edge, attr)

    if isinstance(value, bool):
        raise InvalidWeightTypeError(edge, attr, value)
    if isinstance(value, float):
        weight = value
    elif isinstance(value, Integral):
        try:
            weight = float(int(value))
        except OverflowError:
            raise InvalidWeightTypeError(edge, attr, value) from None
    else:
        raise InvalidWeightTypeError(edge, attr, value)

    if not allow_non_finite and not math.isfinite(weight):
        raise InvalidWeightTypeError(edge, attr, value)
    return weight
