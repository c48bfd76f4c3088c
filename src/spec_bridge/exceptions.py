"""Custom exceptions for spec-bridge.

This module defines exception classes for the error conditions that can
occur while comparing two API specification documents. Missing nested
collections are never errors; only a document that is not a mapping at the
top level is rejected.
"""


class SpecBridgeError(Exception):
    """Base exception for all spec-bridge errors."""

    pass


class MalformedSpecError(SpecBridgeError):
    """Raised when a top-level specification document is not document-shaped.

    Attributes:
        side: Which input was invalid ("old" or "new")
        reason: Why the input was rejected
    """

    def __init__(self, side: str, reason: str):
        """Initialize malformed spec error.

        Args:
            side: Which input was invalid ("old" or "new")
            reason: Why the input was rejected
        """
        self.side = side
        self.reason = reason
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with the offending side."""
        return f"Malformed {self.side} specification: {self.reason}"


class SpecLoadError(SpecBridgeError):
    """Raised when a specification file cannot be read or parsed."""

    def __init__(self, message: str, path: str | None = None):
        """Initialize spec load error.

        Args:
            message: Error message
            path: File that failed to load
        """
        self.message = message
        self.path = path
        super().__init__(f"{message}: {path}" if path else message)


class ConfigurationError(SpecBridgeError):
    """Raised when configuration is invalid or missing."""

    pass


class ExportError(SpecBridgeError):
    """Raised when a comparison cannot be exported in the requested format."""

    pass
