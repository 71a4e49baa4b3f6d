"""Readers and writers for the flat, line-oriented file formats.

Formats (one record per line, blank lines ignored):

- Training file: ``<id> <0|1> <text>``
- Test file: ``<id> __ <text>``
- Label file (system output and gold standard): ``<id> <0|1>``
- Decision-list file: ``<feature, left-justified> <score, 4 decimals> <0|1>``

Any line that does not fit its format aborts the read with a
``MalformedLineError`` naming the file and line. Unreadable or unwritable
files raise ``CorpusIOError``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from .config import DEFAULT_CONFIG, DecisionListConfig
from .errors import CorpusIOError, MalformedLineError
from .models import Decision, DecisionList, Review

logger = logging.getLogger(__name__)

_TRAINING_RE = re.compile(r"^(?P<id>\S+)\s+(?P<label>[01])(?:\s+(?P<text>.*))?$")
_TEST_RE = re.compile(r"^(?P<id>\S+)\s+__(?:\s+(?P<text>.*))?$")
_LABEL_RE = re.compile(r"^(?P<id>\S+)\s+(?P<label>[01])$")
_DECISION_RE = re.compile(r"^(?P<feature>.*\S)\s+(?P<score>\d+\.\d{4})\s+(?P<label>[01])$")


# ---------------------------------------------------------------------------
# Low-level line I/O
# ---------------------------------------------------------------------------

def read_lines(path: str | Path) -> Iterator[tuple[int, str]]:
    r"""Yield ``(line_number, line)`` for each non-blank line of a file.

    Only ``\n`` ends a line (``\r\n`` and ``\r`` are folded into it on
    read), so form feeds or Unicode line separators inside a review stay part
    of that review. Lines are stripped of surrounding whitespace.

    Raises:
        CorpusIOError: If the file cannot be read.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise CorpusIOError(path, "read", exc.strerror or str(exc)) from exc

    logger.debug("Read %d characters from %s", len(text), path)
    for number, line in enumerate(text.split("\n"), 1):
        line = line.strip()
        if line:
            yield number, line


def write_lines(path: str | Path, lines: Iterable[str]) -> int:
    """Write lines to a file, creating parent directories as needed.

    Returns:
        Number of lines written.

    Raises:
        CorpusIOError: If the file cannot be written.
    """
    path = Path(path)
    lines = list(lines)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as exc:
        raise CorpusIOError(path, "write", exc.strerror or str(exc)) from exc

    logger.debug("Wrote %d lines to %s", len(lines), path)
    return len(lines)


def _match_lines(
    path: str | Path,
    pattern: re.Pattern[str],
    expected: str,
) -> Iterator[tuple[int, re.Match[str]]]:
    for number, line in read_lines(path):
        match = pattern.match(line)
        if match is None:
            raise MalformedLineError(path, number, line, expected)
        yield number, match


def _check_unique(
    path: str | Path,
    seen: Mapping[str, object],
    number: int,
    match: re.Match[str],
) -> str:
    review_id = match.group("id")
    if review_id in seen:
        raise MalformedLineError(path, number, match.group(0), "a unique document id")
    return review_id


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------

def read_training_reviews(path: str | Path) -> list[Review]:
    """Read labelled reviews from a training file."""
    return [
        Review(
            review_id=m.group("id"),
            text=m.group("text") or "",
            label=m.group("label") == "1",
        )
        for _, m in _match_lines(path, _TRAINING_RE, "<id> <0|1> <text>")
    ]


def read_test_reviews(path: str | Path) -> list[Review]:
    """Read unlabelled reviews from a test file.

    Raises:
        MalformedLineError: On a malformed line or a repeated id.
    """
    reviews: dict[str, Review] = {}
    for number, m in _match_lines(path, _TEST_RE, "<id> __ <text>"):
        review_id = _check_unique(path, reviews, number, m)
        reviews[review_id] = Review(review_id=review_id, text=m.group("text") or "")
    return list(reviews.values())


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------

def read_labels(path: str | Path) -> dict[str, bool]:
    """Read ``<id> <0|1>`` lines into an ordered id-to-class mapping.

    Raises:
        MalformedLineError: On a malformed line or a repeated id.
    """
    labels: dict[str, bool] = {}
    for number, m in _match_lines(path, _LABEL_RE, "<id> <0|1>"):
        review_id = _check_unique(path, labels, number, m)
        labels[review_id] = m.group("label") == "1"
    return labels


def format_labels(labels: Mapping[str, bool]) -> list[str]:
    return [f"{review_id} {int(label)}" for review_id, label in labels.items()]


def write_labels(path: str | Path, labels: Mapping[str, bool]) -> int:
    """Write an id-to-class mapping as ``<id> <0|1>`` lines, in mapping order."""
    return write_lines(path, format_labels(labels))


# ---------------------------------------------------------------------------
# Decision lists
# ---------------------------------------------------------------------------

def format_decision(decision: Decision, width: int = DEFAULT_CONFIG.feature_width) -> str:
    """Render one decision as a fixed-width decision-list line."""
    return f"{decision.feature:<{width}} {decision.log_likelihood:8.4f} {decision.class_digit:4d}"


def parse_decision(line: str) -> Decision | None:
    """Parse one decision-list line, or return ``None`` if it is malformed."""
    match = _DECISION_RE.match(line.strip())
    if match is None:
        return None
    return Decision.loaded(
        feature=match.group("feature"),
        classification=match.group("label") == "1",
        log_likelihood=float(match.group("score")),
    )


def write_decision_list(
    path: str | Path,
    decision_list: DecisionList,
    config: DecisionListConfig = DEFAULT_CONFIG,
) -> int:
    """Write the decisions at or above the emission threshold.

    Returns:
        Number of decisions written.
    """
    emitted = decision_list.above(config.emission_threshold)
    return write_lines(path, (format_decision(d, config.feature_width) for d in emitted))


def read_decision_list(path: str | Path) -> DecisionList:
    """Read a decision-list file, keeping its line order as priority order."""
    decisions: list[Decision] = []
    for number, line in read_lines(path):
        decision = parse_decision(line)
        if decision is None:
            raise MalformedLineError(path, number, line, "<feature> <score> <0|1>")
        decisions.append(decision)
    return DecisionList(tuple(decisions))
