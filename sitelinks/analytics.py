"""Word count and reading time estimates for page content."""

from __future__ import annotations

from typing import Iterator, Tuple

import regex

WORDS_PER_MINUTE = 200

# With the WORD flag, \b follows the Unicode default word boundary rules.
_BOUNDARY = regex.compile(r"\b", flags=regex.WORD | regex.V1)


def iter_words(text: str) -> Iterator[str]:
    """Yield the word segments of ``text`` that contain a letter or digit."""
    start = 0
    for match in _BOUNDARY.finditer(text):
        end = match.start()
        if end > start:
            segment = text[start:end]
            if any(char.isalnum() for char in segment):
                yield segment
            start = end
    tail = text[start:]
    if any(char.isalnum() for char in tail):
        yield tail


def get_reading_analytics(content: str) -> Tuple[int, int]:
    """Return ``(word_count, reading_time_minutes)`` for ``content``."""
    word_count = sum(1 for _ in iter_words(content))
    return word_count, (word_count + WORDS_PER_MINUTE - 1) // WORDS_PER_MINUTE


__all__ = ["WORDS_PER_MINUTE", "get_reading_analytics", "iter_words"]
