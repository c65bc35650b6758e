"""
Exceptions raised by the analyzer.

Only InputError and TransportError are expected at runtime; both are shown
to the user as-is. InvariantViolation signals a bug in the rule engine.
"""
from __future__ import annotations


class AnalyzerError(Exception):
    """Base class for all analyzer errors."""


class InputError(AnalyzerError):
    """The submitted URL failed validation. Raised before any fetch."""

    def __init__(self, url: str, reason: str = "Invalid URL format"):
        self.url = url
        self.reason = reason
        super().__init__(f"{reason}: {url!r}")


class TransportError(AnalyzerError):
    """The page could not be fetched, or the server answered with a non-ok status."""

    def __init__(self, url: str, status_text: str, status_code: int = 0):
        self.url = url
        self.status_text = status_text
        self.status_code = status_code
        super().__init__(f"Failed to fetch the website: {status_text}")


class InvariantViolation(AnalyzerError):
    """The rule engine produced an inconsistent result."""
