"""Log-likelihood scoring and confidence ordering of decisions.

The score of a feature is the base-2 log of the ratio of its positive to
negative evidence. Zero counts are smoothed so the ratio stays finite:

- Laplace (default): add one to each side when either side is zero.
- Squared: set the zero side to one and the other side ``c`` to
  ``(c - 1) ** 2 + 1``, so that rare features stay weak while frequent ones
  are barely affected.

Well-populated features (both counts non-zero) are never smoothed.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from .config import Smoothing
from .models import Decision, DecisionList


def signed_log_likelihood(
    positive: float,
    negative: float,
    smoothing: Smoothing = Smoothing.LAPLACE,
) -> float:
    """Return the signed, smoothed log2 ratio of positive to negative evidence.

    Raises:
        ValueError: If a count is negative.
    """
    if positive < 0 or negative < 0:
        raise ValueError(f"counts must be non-negative, got ({positive}, {negative})")

    if smoothing == Smoothing.SQUARED:
        if positive == 0:
            positive, negative = 1.0, (negative - 1) ** 2 + 1
        elif negative == 0:
            positive, negative = (positive - 1) ** 2 + 1, 1.0
        total = positive + negative
        return math.log2((positive / total) / (negative / total))

    if positive == 0:
        total = negative + 2
        return math.log2((1 / total) / ((negative + 1) / total))
    if negative == 0:
        total = positive + 2
        return math.log2(((positive + 1) / total) / (1 / total))
    total = positive + negative
    return math.log2((positive / total) / (negative / total))


def score_decision(decision: Decision, smoothing: Smoothing = Smoothing.LAPLACE) -> Decision:
    """Score one decision from its counts. Returns the same decision."""
    score = signed_log_likelihood(decision.positive_count, decision.negative_count, smoothing)
    decision.finalize(score)
    return decision


def score_features(
    decisions: Iterable[Decision],
    smoothing: Smoothing = Smoothing.LAPLACE,
) -> list[Decision]:
    """Score every decision once counting is complete.

    Returns:
        The scored decisions, in their original order.
    """
    return [score_decision(d, smoothing) for d in decisions]


def sort_decisions(decisions: Iterable[Decision]) -> DecisionList:
    """Order scored decisions by descending log-likelihood.

    The sort is stable: decisions with equal scores keep their relative
    order.

    Raises:
        RuntimeError: If any decision has not been scored.
    """
    decisions = list(decisions)
    unscored = [d.feature for d in decisions if not d.is_scored]
    if unscored:
        raise RuntimeError(
            f"{len(unscored)} decision(s) have not been scored, e.g. {unscored[0]!r}"
        )
    ordered = sorted(decisions, key=lambda d: d.log_likelihood, reverse=True)
    return DecisionList(tuple(ordered))
