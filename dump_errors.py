# dump_errors.py
"""
Exception hierarchy for the xdump formatter.

DumpError
 +-- InvalidConfiguration   (also a ValueError)  bad option, raised before any read
 +-- SourceReadFailure      (also an OSError)    the byte source failed mid-dump
"""

from typing import Any, Optional


class DumpError(Exception):
    """Base class for every error raised by the formatter."""


class InvalidConfiguration(DumpError, ValueError):
    """An option is outside its allowed range."""

    def __init__(self, option: str, value: Any, allowed: str):
        super().__init__(f"invalid {option}: {value!r} (expected {allowed})")
        self.option = option
        self.value = value
        self.allowed = allowed


class SourceReadFailure(DumpError, OSError):
    """
    Reading the byte source failed.

    `offset` is the chunk offset that was being read; every line before it
    has already been produced.
    """

    def __init__(self, offset: int, cause: Optional[BaseException] = None):
        # the underlying error is chained as __cause__ by the raiser
        message = f"read failed at offset 0x{offset:08x}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.offset = offset
