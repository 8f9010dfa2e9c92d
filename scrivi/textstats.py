"""Word and character counts for Markdown prose."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TextStats:
    """Word count and Unicode code point count."""

    word_count: int = 0
    character_count: int = 0


def count_text(text: str | bytes) -> TextStats:
    """Count words split on ASCII whitespace and UTF-8 code points.

    No Markdown syntax is stripped; this is a lightweight prose counter.
    """
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    characters = sum(1 for byte in raw if byte & 0xC0 != 0x80)
    return TextStats(word_count=len(raw.split()), character_count=characters)