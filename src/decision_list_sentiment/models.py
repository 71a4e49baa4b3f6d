"""Data models for decision-list training and inference."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass
class Review:
    """A single document read from a training or test file.

    ``label`` is ``True`` for the positive class, ``False`` for the negative
    class, and ``None`` for unlabelled test documents.
    """

    review_id: str
    text: str
    label: Optional[bool] = None


@dataclass
class Decision:
    """A feature together with its class evidence and confidence.

    During training the two counters accumulate evidence; ``finalize`` then
    fixes ``classification`` and ``log_likelihood`` once. Decisions reloaded
    from a decision-list file carry a classification and score but no counts.
    """

    feature: str
    positive_count: float = 0.0
    negative_count: float = 0.0
    classification: bool = False
    _log_likelihood: Optional[float] = field(default=None, init=False, repr=False)

    @classmethod
    def loaded(cls, feature: str, classification: bool, log_likelihood: float) -> "Decision":
        """Build an already-scored decision, as read back from a list file."""
        decision = cls(feature=feature, classification=classification)
        decision._log_likelihood = log_likelihood
        return decision

    @property
    def is_scored(self) -> bool:
        return self._log_likelihood is not None

    @property
    def log_likelihood(self) -> float:
        """Absolute log-likelihood; only available once the decision is scored."""
        if self._log_likelihood is None:
            raise RuntimeError(f"Decision {self.feature!r} has not been scored yet")
        return self._log_likelihood

    def increment(self, positive: bool, amount: float = 1.0) -> None:
        """Add ``amount`` to the counter of the given class."""
        if positive:
            self.positive_count += amount
        else:
            self.negative_count += amount

    def count_for(self, positive: bool) -> float:
        return self.positive_count if positive else self.negative_count

    def merge(self, other: "Decision") -> None:
        """Add another decision's counts to this one."""
        self.positive_count += other.positive_count
        self.negative_count += other.negative_count

    def finalize(self, signed_score: float) -> None:
        """Fix the class from the sign of ``signed_score``, then keep its magnitude.

        Raises:
            RuntimeError: If the decision was already scored.
        """
        if self.is_scored:
            raise RuntimeError(f"Decision {self.feature!r} has already been scored")
        self.classification = signed_score > 0
        self._log_likelihood = abs(signed_score)

    @property
    def class_digit(self) -> int:
        return 1 if self.classification else 0

    def __str__(self) -> str:
        return f"{self.feature}\t{round(self.log_likelihood, 4)}\t{self.class_digit}"


@dataclass(frozen=True)
class DecisionList:
    """Decisions ordered by descending confidence.

    The order is the inference priority: the first decision whose feature
    occurs in a document decides its class.
    """

    decisions: tuple[Decision, ...] = ()

    def __iter__(self) -> Iterator[Decision]:
        return iter(self.decisions)

    def __len__(self) -> int:
        return len(self.decisions)

    def __getitem__(self, index: int) -> Decision:
        return self.decisions[index]

    @property
    def features(self) -> list[str]:
        return [d.feature for d in self.decisions]

    def above(self, threshold: float) -> "DecisionList":
        """Return the leading decisions whose log-likelihood is at least ``threshold``."""
        kept: list[Decision] = []
        for decision in self.decisions:
            if decision.log_likelihood < threshold:
                break
            kept.append(decision)
        return DecisionList(tuple(kept))

    def class_counts(self) -> dict[bool, int]:
        """Number of decisions predicting each class."""
        counts = {True: 0, False: 0}
        for decision in self.decisions:
            counts[decision.classification] += 1
        return counts
