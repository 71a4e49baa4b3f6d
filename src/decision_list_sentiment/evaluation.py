"""Binary evaluation of system labels against gold labels.

Counts the four outcomes of the 2x2 confusion matrix and derives accuracy,
precision, recall and F1. A metric whose denominator is zero (for example
precision when the system predicts no positives) is ``None`` and is
rendered as ``undefined``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .errors import MissingLabelError

UNDEFINED = "undefined"


def _ratio(numerator: int, denominator: int) -> Optional[float]:
    return numerator / denominator if denominator > 0 else None


def format_metric(value: Optional[float]) -> str:
    """Render a metric with four decimals, or ``undefined``."""
    return UNDEFINED if value is None else f"{round(value, 4):.4f}"


@dataclass
class EvaluationResult:
    """Confusion counts and per-document outcomes of one evaluation.

    Attributes:
        true_positives: System positive, gold positive.
        false_positives: System positive, gold negative.
        false_negatives: System negative, gold positive.
        true_negatives: System negative, gold negative.
        rows: ``(id, gold, system)`` triples in gold order.
    """

    true_positives: int = 0
    false_positives: int = 0
    false_negatives: int = 0
    true_negatives: int = 0
    rows: list[tuple[str, bool, bool]] = field(default_factory=list)

    def add(self, review_id: str, gold: bool, system: bool) -> None:
        """Record one document's outcome."""
        self.rows.append((review_id, gold, system))
        if system:
            if gold:
                self.true_positives += 1
            else:
                self.false_positives += 1
        elif gold:
            self.false_negatives += 1
        else:
            self.true_negatives += 1

    @property
    def total(self) -> int:
        return (
            self.true_positives + self.false_positives
            + self.false_negatives + self.true_negatives
        )

    @property
    def accuracy(self) -> Optional[float]:
        return _ratio(self.true_positives + self.true_negatives, self.total)

    @property
    def precision(self) -> Optional[float]:
        return _ratio(self.true_positives, self.true_positives + self.false_positives)

    @property
    def recall(self) -> Optional[float]:
        return _ratio(self.true_positives, self.true_positives + self.false_negatives)

    @property
    def f1(self) -> Optional[float]:
        p, r = self.precision, self.recall
        if p is None or r is None or p + r == 0:
            return None
        return 2 * p * r / (p + r)

    def to_dict(self) -> dict:
        return {
            "true_positives": self.true_positives,
            "false_positives": self.false_positives,
            "false_negatives": self.false_negatives,
            "true_negatives": self.true_negatives,
            "accuracy": None if self.accuracy is None else round(self.accuracy, 4),
            "precision": None if self.precision is None else round(self.precision, 4),
            "recall": None if self.recall is None else round(self.recall, 4),
        }

    def to_lines(self) -> list[str]:
        """Per-document lines followed by the three summary lines."""
        lines = [f"{rid} {int(gold)} {int(system)}" for rid, gold, system in self.rows]
        lines.append(f"Accuracy: {format_metric(self.accuracy)}")
        lines.append(f"Precision: {format_metric(self.precision)}")
        lines.append(f"Recall: {format_metric(self.recall)}")
        return lines


def evaluate(
    gold: Mapping[str, bool],
    system: Mapping[str, bool],
    gold_path: str | Path | None = None,
    system_path: str | Path | None = None,
) -> EvaluationResult:
    """Compare system labels with gold labels.

    Both mappings must label exactly the same ids. Documents are visited in
    gold order. ``gold_path`` and ``system_path`` name the label files in
    error messages.

    Raises:
        MissingLabelError: If an id is labelled in one mapping only.
    """
    for review_id in gold:
        if review_id not in system:
            raise MissingLabelError(review_id, "system", system_path)
    for review_id in system:
        if review_id not in gold:
            raise MissingLabelError(review_id, "gold", gold_path)

    result = EvaluationResult()
    for review_id, gold_label in gold.items():
        result.add(review_id, gold_label, system[review_id])
    return result
