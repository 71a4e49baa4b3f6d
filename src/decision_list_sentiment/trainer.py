"""Training pipeline orchestrating preprocessing, counting, and scoring.

The ``DecisionListTrainer`` class is the primary training entry point. It
folds every labelled review into a feature table with the chosen counting
strategy, and only once all reviews are counted scores and sorts the
decisions into a ``DecisionList``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from .config import DEFAULT_CONFIG, DecisionListConfig
from .counting import CountingStrategy, FeatureTable, get_counting_strategy
from .models import DecisionList, Review
from .preprocessing import ReviewPreprocessor
from .scoring import score_features, sort_decisions

logger = logging.getLogger(__name__)


class DecisionListTrainer:
    """Learn a decision list from labelled reviews.

    Example::

        trainer = DecisionListTrainer(mode="p")
        decision_list = trainer.train(read_training_reviews("train.txt"))

        for decision in decision_list.above(2.5):
            print(decision)

    Args:
        mode: Counting mode, ``"f"`` (frequency), ``"p"`` (presence) or
            ``"h"`` (hybrid). Ignored when ``strategy`` is given.
        config: Pipeline settings.
        strategy: Custom CountingStrategy instance (optional).
        preprocessor: Custom ReviewPreprocessor instance (optional).
    """

    def __init__(
        self,
        mode: str = "p",
        config: DecisionListConfig = DEFAULT_CONFIG,
        strategy: Optional[CountingStrategy] = None,
        preprocessor: Optional[ReviewPreprocessor] = None,
    ) -> None:
        self.config = config
        self.strategy = strategy or get_counting_strategy(mode, cap=config.hybrid_cap)
        self._preprocessor = preprocessor or ReviewPreprocessor(config)

    def count(self, reviews: Iterable[Review]) -> FeatureTable:
        """Build the feature table from labelled reviews.

        Raises:
            ValueError: If a review has no label.
        """
        table: FeatureTable = {}
        n_reviews = 0
        for review in reviews:
            if review.label is None:
                raise ValueError(f"Review '{review.review_id}' has no class label")
            sentences = self._preprocessor.preprocess(review.text)
            self.strategy.count_review(table, sentences, review.label)
            n_reviews += 1

        logger.info(
            "Counted %d features in %d reviews with %s counting",
            len(table),
            n_reviews,
            self.strategy.name,
        )
        return table

    def train(self, reviews: Iterable[Review]) -> DecisionList:
        """Count, score, and sort features into a decision list."""
        table = self.count(reviews)
        scored = score_features(table.values(), self.config.smoothing)
        decision_list = sort_decisions(scored)

        if len(decision_list):
            logger.debug(
                "Top decision %r (%.4f); %d at or above threshold %.2f",
                decision_list[0].feature,
                decision_list[0].log_likelihood,
                len(decision_list.above(self.config.emission_threshold)),
                self.config.emission_threshold,
            )
        return decision_list
