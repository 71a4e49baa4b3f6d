"""N-gram feature construction."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


def build_ngrams(tokens: Sequence[str], n: int) -> Iterator[str]:
    """Yield every contiguous window of ``n`` tokens, joined by a single space.

    Repeated windows are yielded each time they occur.
    """
    if n < 1:
        raise ValueError(f"n-gram order must be positive, got {n}")
    for i in range(len(tokens) - n + 1):
        yield " ".join(tokens[i : i + n])


def extract_features(
    sentences: Iterable[Sequence[str]],
    orders: Sequence[int] = (1, 2),
) -> Iterator[str]:
    """Yield the n-grams of each sentence for every order in ``orders``.

    N-grams never cross a sentence boundary.
    """
    for tokens in sentences:
        for n in orders:
            yield from build_ngrams(tokens, n)
