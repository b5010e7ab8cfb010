"""Assertion helpers for test code."""

from testasserts.asserts import (
    assert_equals,
    assert_true,
    check_equals_and_hash_code,
    fail,
)
from testasserts.equality import check_equality_groups
from testasserts.failure import AssertionFailure

__all__ = [
    "AssertionFailure",
    "assert_equals",
    "assert_true",
    "check_equality_groups",
    "check_equals_and_hash_code",
    "fail",
]
