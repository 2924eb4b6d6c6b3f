"""Graph primitives and helpers.

This package provides the strict multi-directed graph type `StrictMultiDiGraph`,
the `GraphAccessor` protocol consumed by the search, and serialization helpers
in `io`.
"""
