"""Errors raised by the PrizePicks fetch flow."""

from __future__ import annotations


class PrizePicksError(RuntimeError):
    """Base error for PrizePicks ingestion."""


class ConfigurationError(PrizePicksError):
    """Raised when a required setting is missing."""


class UpstreamError(PrizePicksError):
    """Raised on non-success responses or transport failures."""

    def __init__(self, message: str, *, status_code: int | None = None, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)
