"""Assertion helpers for test code.

Every helper raises :class:`~testasserts.failure.AssertionFailure` on a
violation and returns ``None`` otherwise.
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn

from testasserts.failure import AssertionFailure

logger = logging.getLogger(__name__)

STOCK_TRUE_MESSAGE = "Condition expected to be true but was false."
HASH_MISMATCH_MESSAGE = "hash codes for equal objects should match"


def fail(message: str | None = None) -> NoReturn:
    """Raise an AssertionFailure, optionally carrying a message."""
    logger.debug("Assertion failed: %s", message)
    raise AssertionFailure(message)


def assert_true(condition: Any, message: str | None = None) -> None:
    """Fail with ``message`` (or a stock message) when condition is false."""
    if not condition:
        fail(STOCK_TRUE_MESSAGE if message is None else message)


def assert_equals(expected: Any, actual: Any, message: str | None = None) -> None:
    """Assert that two values are equal, treating None as equal only to None."""
    if message is None:
        message = f"Expected '{expected}' but got '{actual}'"
    if expected is None:
        assert_true(actual is None, message)
        return
    assert_true(expected == actual, message)


def check_equals_and_hash_code(
    lhs: Any, rhs: Any, expected_equal: bool, label: str | None = None
) -> None:
    """Check ``==`` and ``hash()`` results at once.

    Tests that ``lhs == rhs`` matches ``expected_equal``, as well as
    ``rhs == lhs``. Also tests that ``hash()`` values are equal if
    ``expected_equal`` is true. Hashes are not compared when
    ``expected_equal`` is false, as unequal objects can share a hash.

    Args:
        lhs: A value whose equality and hash behavior is under test.
        rhs: As lhs.
        expected_equal: True if the values should compare equal, False if not.
        label: Optional text included in failure messages.
    """
    logger.debug(
        "Checking %r vs %r, expected_equal=%s", lhs, rhs, expected_equal
    )

    if lhs is None and rhs is None:
        # Degenerate call; only an expectation of inequality is reported.
        assert_true(
            expected_equal,
            "Your check is dubious...why would you expect None != None?",
        )
        return

    if lhs is None or rhs is None:
        assert_true(
            not expected_equal,
            "Your check is dubious...why would you expect an object "
            "to be equal to None?",
        )

    if lhs is not None:
        _assert_equals_impl(label, expected_equal, bool(lhs == rhs))
    if rhs is not None:
        _assert_equals_impl(label, expected_equal, bool(rhs == lhs))

    if expected_equal:
        hash_message = HASH_MISMATCH_MESSAGE
        if label is not None:
            hash_message += f": {label}"
        try:
            hashes_match = hash(lhs) == hash(rhs)
        except TypeError as e:
            logger.debug("Assertion failed: %s (%s)", hash_message, e)
            raise AssertionFailure(f"{hash_message} ({e})") from e
        assert_true(hashes_match, hash_message)


def _assert_equals_impl(label: str | None, expected: bool, actual: bool) -> None:
    if expected != actual:
        _fail_with_message(label, f"expected:<{expected}> but was:<{actual}>")


def _fail_with_message(user_message: str | None, our_message: str) -> NoReturn:
    fail(our_message if user_message is None else f"{user_message} {our_message}")
