"""Sentence splitting, stop-token filtering, and negation scoping.

Reviews are split into sentences at ``.``, ``?`` and ``!`` (the punctuation
stays with the sentence it ends), each sentence is split on whitespace, stop
tokens are dropped, and everything after the first negation cue in a sentence
is prefixed with ``NOT_``::

    >>> ReviewPreprocessor().preprocess("I didn't like this film. Great cast!")
    [['I', "didn't", 'NOT_like', 'NOT_this', 'NOT_film.'], ['Great', 'cast!']]

Training and inference must share one preprocessor configuration, otherwise
the features seen at test time will not line up with the trained list.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .config import DEFAULT_CONFIG, DecisionListConfig

_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.?!])")


def split_sentences(text: str) -> list[str]:
    """Split text after each sentence-final punctuation mark.

    Empty and whitespace-only fragments are dropped.
    """
    return [s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def is_negation_cue(token: str, config: DecisionListConfig = DEFAULT_CONFIG) -> bool:
    """Whether ``token`` opens a negation scope (``not`` or a ``n't`` contraction)."""
    return token in config.negation_words or token.endswith(config.negation_suffix)


def apply_negation(
    tokens: Sequence[str],
    config: DecisionListConfig = DEFAULT_CONFIG,
) -> list[str]:
    """Return a copy of ``tokens`` with the negation scope tagged.

    Every token after the first negation cue is prefixed with
    ``config.negation_prefix``. Later cues in the same sentence neither
    reopen nor close the scope.
    """
    tagged = list(tokens)
    for i, token in enumerate(tagged[:-1]):
        if is_negation_cue(token, config):
            prefix = config.negation_prefix
            tagged[i + 1:] = [prefix + t for t in tagged[i + 1:]]
            break
    return tagged


class ReviewPreprocessor:
    """Turns raw review text into filtered, negation-tagged sentences.

    Args:
        config: Pipeline settings supplying the stop tokens and negation
            markers.
    """

    def __init__(self, config: DecisionListConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def tokenize(self, sentence: str) -> list[str]:
        """Split one sentence on whitespace and drop stop tokens."""
        stop = self.config.stop_tokens
        return [t for t in sentence.split() if t not in stop]

    def preprocess(self, text: str) -> list[list[str]]:
        """Split, filter, and negation-tag a whole review, sentence by sentence."""
        sentences = []
        for sentence in split_sentences(text):
            tokens = self.tokenize(sentence)
            if tokens:
                sentences.append(apply_negation(tokens, self.config))
        return sentences

    def render(self, text: str) -> str:
        """Render a review as one space-padded string for feature lookup.

        The result starts and ends with a space and separates tokens with a
        single space, so ``" " + feature + " "`` only matches whole tokens.
        """
        return pad_tokens(t for sentence in self.preprocess(text) for t in sentence)


def pad_tokens(tokens: Iterable[str]) -> str:
    """Join tokens with single spaces and pad both ends with a space."""
    return " " + " ".join(tokens) + " "
