"""Exception types raised while reading, training, classifying, or evaluating."""

from __future__ import annotations

from pathlib import Path


class DecisionListError(Exception):
    """Base class for all decision-list failures that abort a run."""


class MalformedLineError(DecisionListError, ValueError):
    """An input line does not match the expected field layout.

    Args:
        path: File the line was read from.
        line_number: 1-based line number within the file.
        line: The offending line (without its newline).
        expected: Short description of the expected layout.
    """

    def __init__(self, path: str | Path, line_number: int, line: str, expected: str) -> None:
        self.path = Path(path)
        self.line_number = line_number
        self.line = line
        self.expected = expected
        excerpt = line if len(line) <= 60 else line[:57] + "..."
        super().__init__(
            f"{self.path}:{line_number}: expected '{expected}', got {excerpt!r}"
        )


class CorpusIOError(DecisionListError, OSError):
    """A source file could not be read or a destination could not be written."""

    def __init__(self, path: str | Path, action: str, reason: str) -> None:
        self.path = Path(path)
        self.action = action
        super().__init__(f"Could not {action} {self.path}: {reason}")


class MissingLabelError(DecisionListError, KeyError):
    """A document id is labelled in one label set but not the other."""

    def __init__(
        self,
        review_id: str,
        missing_from: str,
        path: str | Path | None = None,
    ) -> None:
        self.review_id = review_id
        self.missing_from = missing_from
        self.path = Path(path) if path is not None else None
        super().__init__(review_id)

    def __str__(self) -> str:
        where = f"the {self.missing_from} file"
        if self.path is not None:
            where += f" {self.path}"
        return f"Document id '{self.review_id}' has no label in {where}"
