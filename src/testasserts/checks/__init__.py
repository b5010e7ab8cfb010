"""Non-raising wrappers around the assertion helpers."""

from testasserts.checks.base import AssertionResult
from testasserts.checks.evaluate import evaluate_check, soft_check

__all__ = ["AssertionResult", "evaluate_check", "soft_check"]
