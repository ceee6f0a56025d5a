"""Alpha Hunter exception hierarchy.

Parsing is the only core stage that can fail; every later stage is total.
"""

from typing import List, Sequence


class AlphaHunterError(Exception):
    """Base exception for all Alpha Hunter failures."""


class SchemaError(AlphaHunterError):
    """Raised when required columns cannot be resolved from the header row."""

    def __init__(self, missing: Sequence[str]):
        self.missing: List[str] = list(missing)
        super().__init__(
            "Missing required columns. Could not find: "
            f"{', '.join(self.missing)} (or a valid alternative)."
        )


class EmptyDatasetError(AlphaHunterError):
    """Raised when an upload parses cleanly but yields no projects."""

    def __init__(self, message: str = "CSV file is empty or could not be parsed."):
        super().__init__(message)


class VerificationError(AlphaHunterError):
    """Raised when verification is requested without a configured LLM client."""
