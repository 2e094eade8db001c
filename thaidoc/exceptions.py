"""
Exception hierarchy for the document engine.

Every error carries a machine-readable ``code`` so the web layer can map it
to a flash message or a JSON error without parsing the text.
"""

from __future__ import annotations


class ThaiDocError(Exception):
    """Base exception for all document engine failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NegativeAmountError(ThaiDocError, ValueError):
    """A money amount below zero was passed to a function that only accepts >= 0."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NEGATIVE_AMOUNT", message, details)


class InvalidAmountError(ThaiDocError, ValueError):
    """The value cannot be read as a finite decimal amount."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_AMOUNT", message, details)


class ThaiNumeralParseError(ThaiDocError, ValueError):
    """Thai number words contain a token the parser does not know."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NUMERAL_PARSE_FAILED", message, details)
