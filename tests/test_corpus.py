"""Tests for reading and writing the line-oriented file formats."""

from __future__ import annotations

from pathlib import Path

import pytest

from decision_list_sentiment.config import DecisionListConfig
from decision_list_sentiment.corpus import (
    format_decision,
    parse_decision,
    read_decision_list,
    read_labels,
    read_test_reviews,
    read_training_reviews,
    write_decision_list,
    write_labels,
    write_lines,
)
from decision_list_sentiment.errors import CorpusIOError, MalformedLineError
from decision_list_sentiment.models import Decision, DecisionList


def _write(tmp_path: Path, name: str, text: str) -> Path:
    file = tmp_path / name
    file.write_text(text, encoding="utf-8")
    return file


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------

class TestTrainingFile:
    """Tests for ``<id> <0|1> <text>`` files."""

    def test_read(self, training_file: Path):
        reviews = read_training_reviews(training_file)
        assert len(reviews) == 10
        assert reviews[0].review_id == "pos0.txt"
        assert reviews[0].label is True
        assert reviews[0].text == "A great film . Truly moving ."
        assert reviews[-1].label is False

    def test_blank_lines_skipped(self, tmp_path: Path):
        file = _write(tmp_path, "train.txt", "\nr1 1 good\n\n  \nr2 0 bad\n")
        assert [r.review_id for r in read_training_reviews(file)] == ["r1", "r2"]

    def test_line_separator_inside_text(self, tmp_path: Path):
        file = _write(tmp_path, "train.txt", "r1.txt 1 great film\u2028scene 0 was dull\nr2.txt 0 boring\n")
        reviews = read_training_reviews(file)
        assert [(r.review_id, r.label) for r in reviews] == [("r1.txt", True), ("r2.txt", False)]
        assert reviews[0].text == "great film\u2028scene 0 was dull"

    def test_crlf_line_endings(self, tmp_path: Path):
        file = tmp_path / "train.txt"
        file.write_bytes(b"r1 1 good\r\nr2 0 bad\r\n")
        reviews = read_training_reviews(file)
        assert [(r.review_id, r.text) for r in reviews] == [("r1", "good"), ("r2", "bad")]

    def test_empty_text_allowed(self, tmp_path: Path):
        file = _write(tmp_path, "train.txt", "r1 1\n")
        assert read_training_reviews(file)[0].text == ""

    def test_malformed_class(self, tmp_path: Path):
        file = _write(tmp_path, "train.txt", "r1 1 good\nr2 positive bad\n")
        with pytest.raises(MalformedLineError) as exc_info:
            read_training_reviews(file)
        err = exc_info.value
        assert err.line_number == 2
        assert err.path == file
        assert "train.txt:2" in str(err)

    def test_malformed_is_value_error(self, tmp_path: Path):
        file = _write(tmp_path, "train.txt", "just-an-id\n")
        with pytest.raises(ValueError):
            read_training_reviews(file)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(CorpusIOError, match="missing.txt") as exc_info:
            read_training_reviews(tmp_path / "missing.txt")
        assert isinstance(exc_info.value, OSError)
        assert exc_info.value.action == "read"


class TestTestFile:
    """Tests for ``<id> __ <text>`` files."""

    def test_read(self, unlabelled_file: Path):
        reviews = read_test_reviews(unlabelled_file)
        assert [r.review_id for r in reviews] == ["t1.txt", "t2.txt", "t3.txt"]
        assert reviews[1].text == "A boring mess ."
        assert all(r.label is None for r in reviews)

    def test_labelled_line_is_malformed(self, tmp_path: Path):
        file = _write(tmp_path, "test.txt", "t1 1 some text\n")
        with pytest.raises(MalformedLineError, match="__"):
            read_test_reviews(file)

    def test_form_feed_inside_text(self, tmp_path: Path):
        file = _write(tmp_path, "test.txt", "t1.txt __ great\x0cfilm\n")
        reviews = read_test_reviews(file)
        assert len(reviews) == 1
        assert reviews[0].text == "great\x0cfilm"

    def test_duplicate_id(self, tmp_path: Path):
        file = _write(tmp_path, "test.txt", "t1 __ one\nt1 __ two\n")
        with pytest.raises(MalformedLineError) as exc_info:
            read_test_reviews(file)
        assert exc_info.value.line_number == 2


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------

class TestLabels:
    """Tests for ``<id> <0|1>`` files."""

    def test_read_preserves_order(self, gold_file: Path):
        labels = read_labels(gold_file)
        assert list(labels.items()) == [("t1.txt", True), ("t2.txt", False), ("t3.txt", True)]

    def test_write_then_read(self, tmp_path: Path):
        labels = {"b": False, "a": True}
        path = tmp_path / "out" / "labels.txt"
        assert write_labels(path, labels) == 2
        assert path.read_text(encoding="utf-8") == "b 0\na 1\n"
        assert read_labels(path) == labels

    def test_extra_field_is_malformed(self, tmp_path: Path):
        file = _write(tmp_path, "labels.txt", "a 1 0\n")
        with pytest.raises(MalformedLineError):
            read_labels(file)

    def test_duplicate_id(self, tmp_path: Path):
        file = _write(tmp_path, "labels.txt", "a 1\na 0\n")
        with pytest.raises(MalformedLineError, match="unique"):
            read_labels(file)


# ---------------------------------------------------------------------------
# Decision lists
# ---------------------------------------------------------------------------

class TestDecisionListFile:
    """Tests for the fixed-width decision-list format."""

    def test_format_decision(self):
        line = format_decision(Decision.loaded("great", True, 2.5849625))
        assert line == "great".ljust(40) + "   2.5850    1"

    def test_long_feature_not_truncated(self):
        feature = "NOT_extraordinarily NOT_underwhelming_experience"
        line = format_decision(Decision.loaded(feature, False, 10.0), width=20)
        assert line.startswith(feature + "  10.0000")
        assert parse_decision(line).feature == feature

    def test_parse_bigram(self):
        decision = parse_decision("jackie brown                               5.4594    1")
        assert decision.feature == "jackie brown"
        assert decision.classification is True
        assert decision.log_likelihood == pytest.approx(5.4594)

    def test_parse_numeric_feature(self):
        decision = parse_decision("rated 1                                    3.0000    0")
        assert decision.feature == "rated 1"
        assert decision.classification is False

    def test_parse_malformed(self):
        assert parse_decision("great 2.5 1") is None
        assert parse_decision("") is None

    def test_round_trip_keeps_order_and_class(self, tmp_path: Path):
        decision_list = DecisionList((
            Decision.loaded("seagal", False, 5.7549),
            Decision.loaded("jackie brown", True, 5.4594),
            Decision.loaded("NOT_worth", False, 3.0),
            Decision.loaded("mulan", True, 3.0),
        ))
        path = tmp_path / "dl.txt"
        assert write_decision_list(path, decision_list) == 4

        loaded = read_decision_list(path)
        assert loaded.features == decision_list.features
        assert [d.classification for d in loaded] == [d.classification for d in decision_list]

    def test_threshold_filters_output(self, tmp_path: Path):
        decision_list = DecisionList((
            Decision.loaded("strong", True, 4.0),
            Decision.loaded("edge", False, 2.5),
            Decision.loaded("weak", True, 1.0),
        ))
        path = tmp_path / "dl.txt"
        assert write_decision_list(path, decision_list) == 2
        assert read_decision_list(path).features == ["strong", "edge"]

        config = DecisionListConfig(emission_threshold=0.0)
        assert write_decision_list(path, decision_list, config) == 3

    def test_malformed_line(self, tmp_path: Path):
        file = _write(tmp_path, "dl.txt", "great    3.0000    1\nbroken line\n")
        with pytest.raises(MalformedLineError) as exc_info:
            read_decision_list(file)
        assert exc_info.value.line_number == 2


class TestWriteLines:
    """Tests for low-level writing."""

    def test_unwritable_destination(self, tmp_path: Path):
        blocker = _write(tmp_path, "blocker", "")
        with pytest.raises(CorpusIOError, match="write"):
            write_lines(blocker / "out.txt", ["x"])

    def test_empty(self, tmp_path: Path):
        path = tmp_path / "empty.txt"
        assert write_lines(path, []) == 0
        assert path.read_text(encoding="utf-8") == ""
