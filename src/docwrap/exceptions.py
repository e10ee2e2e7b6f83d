"""Exception types raised by docwrap."""

from __future__ import annotations

from pathlib import Path


class DocwrapError(RuntimeError):
    """Base class for errors surfaced by docwrap."""


class ConfigError(DocwrapError):
    """A configuration value is outside its contract.

    Raised when settings are loaded or a check is constructed, never while
    lines are being evaluated.
    """

    def __init__(self, message: str, *, key: str, value: object = None):
        super().__init__(message)
        self.key = key
        self.value = value


class PayloadError(DocwrapError):
    """A serialized comment tree could not be read, decoded or validated."""

    def __init__(self, message: str, *, stage: str, path: Path | None = None):
        super().__init__(message)
        self.stage = stage
        self.path = path
