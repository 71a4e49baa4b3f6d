"""Shared test fixtures for decision-list-sentiment tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from decision_list_sentiment.models import Review

POSITIVE_REVIEWS = [
    "A great film . Truly moving .",
    "The cast was great and the story was moving .",
    "What great music !",
    "great acting , great script .",
    "I loved it . great fun .",
]

NEGATIVE_REVIEWS = [
    "A boring film . I didn't like it .",
    "boring plot and boring cast .",
    "The story was boring .",
    "It was not good . boring .",
    "boring , boring , boring .",
]


@pytest.fixture
def training_reviews() -> list[Review]:
    """Five positive and five negative labelled reviews."""
    reviews = [
        Review(f"pos{i}.txt", text, True) for i, text in enumerate(POSITIVE_REVIEWS)
    ]
    reviews += [
        Review(f"neg{i}.txt", text, False) for i, text in enumerate(NEGATIVE_REVIEWS)
    ]
    return reviews


@pytest.fixture
def training_file(tmp_path: Path) -> Path:
    """Training file in ``<id> <0|1> <text>`` format."""
    lines = [f"pos{i}.txt 1 {text}" for i, text in enumerate(POSITIVE_REVIEWS)]
    lines += [f"neg{i}.txt 0 {text}" for i, text in enumerate(NEGATIVE_REVIEWS)]
    file = tmp_path / "train.txt"
    file.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return file


@pytest.fixture
def unlabelled_file(tmp_path: Path) -> Path:
    """Test file in ``<id> __ <text>`` format."""
    file = tmp_path / "test.txt"
    file.write_text(
        "t1.txt __ Such great performances .\n"
        "t2.txt __ A boring mess .\n"
        "t3.txt __ Nothing to say .\n",
        encoding="utf-8",
    )
    return file


@pytest.fixture
def gold_file(tmp_path: Path) -> Path:
    """Gold labels matching ``unlabelled_file``."""
    file = tmp_path / "gold.txt"
    file.write_text("t1.txt 1\nt2.txt 0\nt3.txt 1\n", encoding="utf-8")
    return file
