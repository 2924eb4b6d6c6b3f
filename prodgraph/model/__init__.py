"""Data model: paths and search results."""

from prodgraph.model.path import Path
from prodgraph.model.result import SearchResult, WeightedPath

__all__ = ["Path", "SearchResult", "WeightedPath"]
