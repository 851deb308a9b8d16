"""Constants for stdout formatting."""

from __future__ import annotations

ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_RESET: str = "\033[0m"

CODES_HEADING: str = "Errors to check for:"
DOCUMENT_HEADING: str = "Using this JSON content:"
ERRORS_HEADING: str = "Errors Found..."
VALID_MESSAGE: str = "Configuration is valid."
