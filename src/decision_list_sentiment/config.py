"""Immutable settings shared by training, inference, and list emission.

``DecisionListConfig`` gathers every tunable constant of the pipeline in one
frozen dataclass. The same instance must be handed to the trainer and the
classifier so that both preprocess text identically.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Smoothing(str, Enum):
    """How zero counts are smoothed before the log-likelihood ratio is taken."""

    LAPLACE = "laplace"
    SQUARED = "squared"


STOP_TOKENS: frozenset[str] = frozenset({
    "a", "an", "the", "to", "of", "and",
    ".", ",", "'", '"', ";", ":", "-", "(", ")", "&",
})


@dataclass(frozen=True)
class DecisionListConfig:
    """Settings for a decision-list training or inference run.

    Attributes:
        stop_tokens: Tokens dropped from every sentence before negation
            scoping and n-gram construction.
        negation_prefix: Prefix added to tokens inside a negation scope.
        hybrid_cap: Per-review ceiling on a feature's count under hybrid
            counting.
        emission_threshold: Minimum log-likelihood for a decision to be
            written to the decision-list file.
        feature_width: Column width the feature name is left-justified to in
            the decision-list file.
        smoothing: Zero-count smoothing applied when scoring.
        default_class: Class returned when no decision matches a document
            (``False`` = negative).
    """

    stop_tokens: frozenset[str] = STOP_TOKENS
    negation_prefix: str = "NOT_"
    hybrid_cap: int = 2
    emission_threshold: float = 2.5
    feature_width: int = 40
    smoothing: Smoothing = Smoothing.LAPLACE
    default_class: bool = False
    negation_words: frozenset[str] = field(default_factory=lambda: frozenset({"not"}))
    negation_suffix: str = "n't"

    def __post_init__(self) -> None:
        if self.hybrid_cap < 1:
            raise ValueError(f"hybrid_cap must be at least 1, got {self.hybrid_cap}")
        if self.emission_threshold < 0:
            raise ValueError(
                f"emission_threshold must be non-negative, got {self.emission_threshold}"
            )
        if self.feature_width < 1:
            raise ValueError(f"feature_width must be positive, got {self.feature_width}")
        if not self.negation_prefix:
            raise ValueError("negation_prefix must not be empty")
        # Accept plain sets/lists from callers but keep the instance hashable.
        object.__setattr__(self, "stop_tokens", frozenset(self.stop_tokens))
        object.__setattr__(self, "negation_words", frozenset(self.negation_words))
        object.__setattr__(self, "smoothing", Smoothing(self.smoothing))


DEFAULT_CONFIG = DecisionListConfig()
