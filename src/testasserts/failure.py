"""The exception raised by every assertion helper."""

from __future__ import annotations


class AssertionFailure(AssertionError):
    """Raised when a test assertion is shown to be invalid.

    Attributes:
        message: Diagnostic text, or None when the failure carries no message.
    """

    def __init__(self, message: str | None = None):
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.message = message
