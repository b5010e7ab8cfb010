"""Base data structures for non-raising checks."""

from dataclasses import dataclass


@dataclass
class AssertionResult:
    """Result of evaluating a single check.

    Attributes:
        name: Identifier for the check (e.g. "equals:ints-equal").
        passed: Whether the wrapped helper completed without failing.
        message: "ok" on success, otherwise the failure message.
    """

    name: str
    passed: bool
    message: str
