"""Error codes and the exception raised by the core."""

from __future__ import annotations

import enum


class ErrorCode(enum.IntEnum):
    """Category of a failure reported by the core."""

    OK = 0
    INVALID_ARGUMENT = 1
    UNSUPPORTED_VERSION = 2
    IO_ERROR = 3
    PERMISSION_DENIED = 4
    PARSE_ERROR = 5
    VALIDATION_ERROR = 6
    REPAIR_REQUIRED = 7
    GIT_UNAVAILABLE = 8
    GIT_ERROR = 9
    SECURE_STORE_UNAVAILABLE = 10
    SECURE_STORE_ERROR = 11
    IDENTITY_ERROR = 12
    INTERNAL_ERROR = 13


class ScriviError(Exception):
    """A failure carrying an error code, a message and optional path and detail."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        path: str = "",
        detail: str = "",
    ) -> None:
        super().__init__(message)
        self.code = ErrorCode(code)
        self.message = message
        self.path = path
        self.detail = detail

    def __str__(self) -> str:
        text = self.message
        if self.path:
            text = f"{text} ({self.path})"
        if self.detail:
            text = f"{text}: {self.detail}"
        return text

    def __repr__(self) -> str:
        return (
            f"ScriviError(code={self.code.name}, message={self.message!r}, "
            f"path={self.path!r}, detail={self.detail!r})"
        )