"""Exceptions raised by the ingestion layer."""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for nail-file parsing failures."""


class NoDataFoundError(ParseError):
    """Raised when a full scan yields no valid point records."""

    DEFAULT_MESSAGE = (
        "No valid nail data found. Please ensure the file is in Tebo-ICT "
        "or compatible .asc format."
    )

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.DEFAULT_MESSAGE)
