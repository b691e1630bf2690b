"""Numeric reductions and predicate helpers over score lists.

Exports:
    total(xs) -> number
    average(xs) -> float
    filter_by(xs, predicate) -> list
    all_satisfy(xs, predicate) -> bool
    any_satisfy(xs, predicate) -> bool
    score_summary(scores, ...) -> dict
"""

from typing import Any, Callable, Iterable, Sequence

import numpy as np

from objlab import config
from objlab.models.errors import EmptyInputError


def total(xs: Sequence[float]) -> float:
    """Sum of xs; 0 for empty input. Integer input gives an exact int back."""
    if len(xs) == 0:
        return 0
    # object dtype adds Python numbers directly, so ints never wrap at 64 bits
    result = np.sum(np.asarray(xs, dtype=object))
    return result.item() if isinstance(result, np.generic) else result


def average(xs: Sequence[float]) -> float:
    """Arithmetic mean of xs.

    Raises:
        EmptyInputError: xs is empty (no mean exists, and NaN is not returned).
    """
    if len(xs) == 0:
        raise EmptyInputError("average() of an empty sequence")
    return float(np.mean(np.asarray(xs, dtype=float)))


def filter_by(xs: Iterable[Any], predicate: Callable[[Any], bool]) -> list:
    return [x for x in xs if predicate(x)]


def all_satisfy(xs: Iterable[Any], predicate: Callable[[Any], bool]) -> bool:
    # vacuously true on empty input
    return all(predicate(x) for x in xs)


def any_satisfy(xs: Iterable[Any], predicate: Callable[[Any], bool]) -> bool:
    return any(predicate(x) for x in xs)


def score_summary(
    scores: Sequence[float],
    high: float = config.HIGH_SCORE,
    low: float = config.LOW_SCORE,
    passing: float = config.PASSING_SCORE,
    exceptional: float = config.EXCEPTIONAL_SCORE,
) -> dict:
    """High/low score lists plus pass-all and exceptional-score flags."""
    return {
        f"High Scores (>={high})": filter_by(scores, lambda s: s >= high),
        f"Low Scores (<{low})": filter_by(scores, lambda s: s < low),
        f"Passed All (>={passing})": all_satisfy(scores, lambda s: s >= passing),
        f"Has Exceptional Score (>={exceptional})": any_satisfy(scores, lambda s: s >= exceptional),
    }
