"""Strategies for folding a review's features into the feature table.

All strategies see the same preprocessed sentences and differ only in how
repeated features within one review are counted:

- ``FrequencyCounter`` counts every occurrence.
- ``PresenceCounter`` counts each distinct feature once per review.
- ``HybridCounter`` counts occurrences up to a per-review cap.

One strategy governs a whole training run; pick it with
``get_counting_strategy``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .features import extract_features
from .models import Decision

FeatureTable = dict[str, Decision]


def _lookup(table: FeatureTable, feature: str) -> Decision:
    """Return the decision for ``feature``, creating a zero-count one if needed."""
    decision = table.get(feature)
    if decision is None:
        decision = table[feature] = Decision(feature)
    return decision


class CountingStrategy(ABC):
    """Abstract base class for feature counting policies.

    Args:
        orders: N-gram sizes to extract from each sentence.
    """

    mode: str = ""
    name: str = ""

    def __init__(self, orders: Sequence[int] = (1, 2)) -> None:
        self.orders = tuple(orders)

    @abstractmethod
    def count_review(
        self,
        table: FeatureTable,
        sentences: Sequence[Sequence[str]],
        positive: bool,
    ) -> None:
        """Add one review's features to ``table`` under the review's class.

        Args:
            table: Global feature table, updated in place.
            sentences: Filtered, negation-tagged token lists of the review.
            positive: Known class of the review.
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(orders={self.orders})"


class FrequencyCounter(CountingStrategy):
    """Count every occurrence of a feature."""

    mode = "f"
    name = "frequency"

    def count_review(self, table, sentences, positive):
        for feature in extract_features(sentences, self.orders):
            _lookup(table, feature).increment(positive)


class PresenceCounter(CountingStrategy):
    """Count a feature at most once per review.

    Counts then reflect the number of reviews containing the feature.
    """

    mode = "p"
    name = "presence"

    def count_review(self, table, sentences, positive):
        # dict keeps first-seen order so ties sort deterministically
        seen = dict.fromkeys(extract_features(sentences, self.orders))
        for feature in seen:
            _lookup(table, feature).increment(positive)


class HybridCounter(CountingStrategy):
    """Count occurrences of a feature up to ``cap`` per review.

    Presence counting is the special case ``cap=1``.

    Args:
        cap: Maximum contribution of one review to a feature's count.
        orders: N-gram sizes to extract from each sentence.
    """

    mode = "h"
    name = "hybrid"

    def __init__(self, cap: int = 2, orders: Sequence[int] = (1, 2)) -> None:
        super().__init__(orders)
        if cap < 1:
            raise ValueError(f"cap must be at least 1, got {cap}")
        self.cap = cap

    def count_review(self, table, sentences, positive):
        local: FeatureTable = {}
        for feature in extract_features(sentences, self.orders):
            decision = _lookup(local, feature)
            if decision.count_for(positive) < self.cap:
                decision.increment(positive)

        for feature, decision in local.items():
            _lookup(table, feature).merge(decision)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(cap={self.cap}, orders={self.orders})"


_STRATEGIES: dict[str, type[CountingStrategy]] = {
    cls.mode: cls for cls in (FrequencyCounter, PresenceCounter, HybridCounter)
}
_STRATEGIES.update({cls.name: cls for cls in (FrequencyCounter, PresenceCounter, HybridCounter)})


def get_counting_strategy(
    mode: str,
    cap: int = 2,
    orders: Sequence[int] = (1, 2),
) -> CountingStrategy:
    """Return the counting strategy for a mode flag.

    Args:
        mode: ``"f"``/``"frequency"``, ``"p"``/``"presence"``, or
            ``"h"``/``"hybrid"``.
        cap: Per-review cap used by the hybrid strategy.
        orders: N-gram sizes to extract.

    Raises:
        ValueError: If the mode is not recognised.
    """
    cls = _STRATEGIES.get(mode.lower())
    if cls is None:
        raise ValueError(
            f"Invalid counting mode: {mode!r}. "
            f"Supported: {', '.join(sorted(_STRATEGIES))}"
        )
    if cls is HybridCounter:
        return HybridCounter(cap=cap, orders=orders)
    return cls(orders=orders)
