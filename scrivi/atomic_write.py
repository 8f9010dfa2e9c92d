"""Atomic replacement of text files."""

from __future__ import annotations

import os

from scrivi.errors import ErrorCode, ScriviError


def atomic_write_text_file(path: str | os.PathLike, text: str | bytes) -> None:
    """Write text to a sibling '.tmp' file, then rename it over path."""
    target = os.fspath(path)
    tmp_path = target + ".tmp"
    payload = text.encode("utf-8") if isinstance(text, str) else bytes(text)

    try:
        out = open(tmp_path, "wb")
    except OSError as exc:
        raise ScriviError(
            ErrorCode.IO_ERROR, "could not open temp file for writing", tmp_path
        ) from exc
    try:
        with out:
            out.write(payload)
    except OSError as exc:
        raise ScriviError(ErrorCode.IO_ERROR, "write failed", tmp_path) from exc

    try:
        os.replace(tmp_path, target)
    except OSError as exc:
        try:
            os.remove(tmp_path)
        except OSError:
            pass
        raise ScriviError(
            ErrorCode.IO_ERROR, f"rename failed: {exc.strerror or exc}", target
        ) from exc