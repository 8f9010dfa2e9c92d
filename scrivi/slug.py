"""URL- and file-name-friendly slugs."""

from __future__ import annotations


def make_slug(text: str) -> str:
    """Lowercase, hyphen-separated slug of text.

    Non-ASCII characters are dropped, runs of other non-alphanumerics become
    a single hyphen, and leading or trailing hyphens are stripped.
    """
    parts: list[str] = []
    last_was_hyphen = True
    for ch in text:
        if not ch.isascii():
            continue
        if ch.isalnum():
            parts.append(ch.lower())
            last_was_hyphen = False
        elif not last_was_hyphen and parts:
            parts.append("-")
            last_was_hyphen = True
    if parts and parts[-1] == "-":
        parts.pop()
    return "".join(parts)