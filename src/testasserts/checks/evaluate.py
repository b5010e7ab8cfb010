"""Evaluate assertion helpers without raising."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

from testasserts.asserts import check_equals_and_hash_code
from testasserts.checks.base import AssertionResult
from testasserts.config import EqualityGroupsCheck, EqualsCheck
from testasserts.equality import check_equality_groups
from testasserts.failure import AssertionFailure

logger = logging.getLogger(__name__)


def soft_check(
    name: str, func: Callable[..., Any], *args: Any, **kwargs: Any
) -> AssertionResult:
    """Run a raising helper and capture an AssertionFailure as a result."""
    try:
        func(*args, **kwargs)
    except AssertionFailure as e:
        logger.debug("%s failed: %s", name, e)
        return AssertionResult(name=name, passed=False, message=str(e))
    logger.debug("%s passed", name)
    return AssertionResult(name=name, passed=True, message="ok")


def evaluate_check(check: BaseModel) -> AssertionResult:
    """Dispatch a check model to the matching helper."""
    if isinstance(check, EqualsCheck):
        return soft_check(
            f"equals:{check.name}",
            check_equals_and_hash_code,
            check.lhs,
            check.rhs,
            check.expected_equal,
            check.label,
        )
    if isinstance(check, EqualityGroupsCheck):
        return soft_check(
            f"equality_groups:{check.name}",
            check_equality_groups,
            *check.groups,
            label=check.name,
        )
    raise ValueError(f"Unknown check type: {type(check).__name__}")
