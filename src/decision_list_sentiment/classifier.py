"""First-match classification with a trained decision list.

Provides ``DecisionListClassifier``, which scans a decision list from the
most to the least confident decision and returns the class of the first
feature found in a document. Documents are preprocessed exactly as during
training and rendered as one space-padded string, so a feature only matches
whole tokens::

    classifier = DecisionListClassifier(decision_list)
    classifier.classify("What a great movie!")          # True
    classifier.classify_reviews(reviews)                 # {"cv001.txt": True, ...}

When no feature matches, the configured default class is returned
(negative unless configured otherwise).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from .config import DEFAULT_CONFIG, DecisionListConfig
from .models import Decision, DecisionList, Review
from .preprocessing import ReviewPreprocessor

logger = logging.getLogger(__name__)


class DecisionListClassifier:
    """Classify documents with an ordered decision list.

    Args:
        decision_list: Decisions in inference priority order. The order is
            trusted as given.
        config: Pipeline settings; must match the ones used for training.
        preprocessor: Custom ReviewPreprocessor instance (optional).
    """

    def __init__(
        self,
        decision_list: DecisionList | Iterable[Decision],
        config: DecisionListConfig = DEFAULT_CONFIG,
        preprocessor: Optional[ReviewPreprocessor] = None,
    ) -> None:
        if not isinstance(decision_list, DecisionList):
            decision_list = DecisionList(tuple(decision_list))
        self.decision_list = decision_list
        self.config = config
        self._preprocessor = preprocessor or ReviewPreprocessor(config)

    @property
    def default_class(self) -> bool:
        return self.config.default_class

    def match(self, rendered: str) -> Optional[Decision]:
        """Return the first decision whose feature occurs in a rendered document.

        Args:
            rendered: Output of ``ReviewPreprocessor.render``.
        """
        for decision in self.decision_list:
            if f" {decision.feature} " in rendered:
                return decision
        return None

    def classify_rendered(self, rendered: str) -> bool:
        """Classify an already preprocessed and padded document."""
        decision = self.match(rendered)
        if decision is None:
            logger.debug("No decision matched; using default class %d", int(self.default_class))
            return self.default_class
        return decision.classification

    def classify(self, text: str) -> bool:
        """Classify raw document text.

        Returns:
            ``True`` for the positive class, ``False`` for the negative class.
        """
        return self.classify_rendered(self._preprocessor.render(text))

    def classify_reviews(self, reviews: Iterable[Review]) -> dict[str, bool]:
        """Classify a batch of reviews.

        Returns:
            Mapping of review id to predicted class, in input order.
        """
        labels: dict[str, bool] = {}
        unmatched = 0
        for review in reviews:
            rendered = self._preprocessor.render(review.text)
            decision = self.match(rendered)
            if decision is None:
                unmatched += 1
                labels[review.review_id] = self.default_class
            else:
                labels[review.review_id] = decision.classification

        logger.info(
            "Classified %d reviews (%d positive, %d with no matching feature)",
            len(labels),
            sum(labels.values()),
            unmatched,
        )
        return labels
