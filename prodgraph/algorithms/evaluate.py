"""Prune/continue decision for a single search branch.

`evaluate` looks at one branch (its path and cumulative weight) together with
the search bounds and says two things: whether the branch's end vertex should
be recorded as a result, and whether the branch should be expanded further.
It holds no state and performs no I/O; the search engine acts on the answer.
"""

from __future__ import annotations

from enum import IntEnum

from prodgraph.model.path import Path


class Evaluation(IntEnum):
    """Outcome of evaluating a branch."""

    #: Do not record; expand the branch's outgoing edges.
    EXCLUDE_AND_CONTINUE = 1
    #: Do not record; stop this branch.
    EXCLUDE_AND_PRUNE = 2
    #: Record the end vertex; expand further.
    INCLUDE_AND_CONTINUE = 3
    #: Record the end vertex; stop this branch.
    INCLUDE_AND_PRUNE = 4

    @property
    def includes(self) -> bool:
        return self in (Evaluation.INCLUDE_AND_CONTINUE, Evaluation.INCLUDE_AND_PRUNE)

    @property
    def continues(self) -> bool:
        return self in (
            Evaluation.EXCLUDE_AND_CONTINUE,
            Evaluation.INCLUDE_AND_CONTINUE,
        )


def evaluate(path: Path, weight: float, max_depth: int, threshold: float) -> Evaluation:
    """Decide what to do with a branch.

    The root path is never recorded and is expanded regardless of threshold,
    as long as ``max_depth`` allows at least one edge. Any other path whose
    weight fell below ``threshold`` is dropped. A surviving path is recorded
    (unless it has looped back to the start vertex), and expanded only while
    it is shorter than ``max_depth``.

    Args:
        path: The branch's path.
        weight: Product of the edge weights along `path`.
        max_depth: Maximum number of edges on a recorded or expanded path.
        threshold: Minimum cumulative weight to keep a branch.

    Returns:
        The `Evaluation` for this branch.
    """
    length = path.length
    if length == 0:
        if max_depth <= 0:
            return Evaluation.EXCLUDE_AND_PRUNE
        return Evaluation.EXCLUDE_AND_CONTINUE

    if weight < threshold or length > max_depth:
        return Evaluation.EXCLUDE_AND_PRUNE

    # A cycle back to the start is walked through but never reported.
    if path.end_node == path.start_node:
        if length < max_depth:
            return Evaluation.EXCLUDE_AND_CONTINUE
        return Evaluation.EXCLUDE_AND_PRUNE

    if length < max_depth:
        return Evaluation.INCLUDE_AND_CONTINUE
    return Evaluation.INCLUDE_AND_PRUNE
