"""Tests for the non-raising check layer."""

import logging

import pytest

from testasserts import assert_equals, assert_true, fail
from testasserts.checks import AssertionResult, evaluate_check, soft_check
from testasserts.config import EqualityGroupsCheck, EqualsCheck


# --- soft_check ---


def test_soft_check_pass():
    result = soft_check("five", assert_equals, 5, 5)
    assert isinstance(result, AssertionResult)
    assert result.passed is True
    assert result.name == "five"
    assert result.message == "ok"


def test_soft_check_captures_failure():
    result = soft_check("five-six", assert_equals, 5, 6)
    assert result.passed is False
    assert result.message == "Expected '5' but got '6'"


def test_soft_check_passes_keyword_arguments():
    result = soft_check("custom", assert_true, False, message="custom")
    assert result.passed is False
    assert result.message == "custom"


def test_soft_check_failure_without_message():
    result = soft_check("bare", fail)
    assert result.passed is False
    assert result.message == ""


def test_soft_check_propagates_other_errors():
    def _broken():
        raise KeyError("boom")

    with pytest.raises(KeyError):
        soft_check("broken", _broken)


# --- evaluate_check dispatcher ---


def test_evaluate_equals_check_pass():
    result = evaluate_check(EqualsCheck(name="ints", lhs=5, rhs=5))
    assert result.passed is True
    assert result.name == "equals:ints"


def test_evaluate_equals_check_fail_uses_label():
    result = evaluate_check(
        EqualsCheck(name="ints", lhs=5, rhs=6, label="five and six")
    )
    assert result.passed is False
    assert result.message == "five and six expected:<True> but was:<False>"


def test_evaluate_equals_check_expected_unequal():
    result = evaluate_check(
        EqualsCheck(name="null", lhs=None, rhs="x", expected_equal=False)
    )
    assert result.passed is True


def test_evaluate_groups_check_pass():
    result = evaluate_check(
        EqualityGroupsCheck(name="numbers", groups=[[1, 1.0], [2]])
    )
    assert result.passed is True
    assert result.name == "equality_groups:numbers"


def test_evaluate_groups_check_fail_names_items():
    result = evaluate_check(EqualityGroupsCheck(name="numbers", groups=[[1], [1.0]]))
    assert result.passed is False
    assert result.message.startswith("numbers [group 1, item 1] vs [group 2, item 1]")


def test_evaluate_unknown_check_type():
    with pytest.raises(ValueError, match="[Uu]nknown"):
        evaluate_check(AssertionResult(name="x", passed=True, message="ok"))


def test_soft_check_logs_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="testasserts")
    soft_check("five-six", assert_equals, 5, 6)
    records = [r for r in caplog.records if r.name == "testasserts.checks.evaluate"]
    assert [r.levelno for r in records] == [logging.DEBUG]
    assert "five-six failed" in records[0].getMessage()
