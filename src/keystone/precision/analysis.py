from __future__ import annotations

import logging
import operator
from typing import Any, Callable, Optional, TypeVar

from keystone._contracts import contract_violation

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _climb(
    near: T,
    function: Callable[[T], Any],
    within: Optional[tuple[T, T]],
    better: Callable[[Any, Any], bool],
) -> T:
    lower, upper = within if within is not None else (None, None)
    if within is not None and not lower <= near <= upper:
        contract_violation(f"The starting point {near!r} is outside {lower!r}...{upper!r}.")

    location = near
    score = function(location)
    steps = 0

    while upper is None or location < upper:
        candidate = location + 1
        candidate_score = function(candidate)
        if not better(candidate_score, score):
            break
        location, score = candidate, candidate_score
        steps += 1

    while lower is None or location > lower:
        candidate = location - 1
        candidate_score = function(candidate)
        if not better(candidate_score, score):
            break
        location, score = candidate, candidate_score
        steps += 1

    logger.debug("Search from %r settled on %r after %d steps", near, location, steps)
    return location


def find_local_minimum(
    near: T,
    function: Callable[[T], Any],
    within: Optional[tuple[T, T]] = None,
) -> T:
    """
    Hill-climbs from ``near`` to a point whose neighbours both score no lower.

    Points must support ``+ 1`` and ``- 1``. The walk first follows successors
    while they score strictly lower, then predecessors. ``within`` bounds the
    walk inclusively; a start outside it is a contract violation.
    """
    return _climb(near, function, within, operator.lt)


def find_local_maximum(
    near: T,
    function: Callable[[T], Any],
    within: Optional[tuple[T, T]] = None,
) -> T:
    return _climb(near, function, within, operator.gt)
