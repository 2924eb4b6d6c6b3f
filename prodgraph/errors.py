"""Exceptions raised by prodgraph."""

from __future__ import annotations

from typing import Any, Hashable


class PathSearchError(Exception):
    """Base class for prodgraph errors."""


class InvalidWeightTypeError(PathSearchError, ValueError):
    """An edge weight is missing, non-numeric, or not finite.

    Attributes:
        edge: Identifier of the offending edge.
        attr: Name of the weight attribute that was read.
        value: The value found (``None`` when the attribute is absent).
    """

    def __init__(self, edge: Hashable, attr: str, value: Any) -> None:
        self.edge = edge
        self.attr = attr
        self.value = value
        super().__init__(
            f"invalid property type {value!r} for '{attr}' on edge {edge!r}"
        )
