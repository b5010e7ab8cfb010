"""Equality-group checks built on check_equals_and_hash_code."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from testasserts.asserts import check_equals_and_hash_code

logger = logging.getLogger(__name__)


class _Unrelated:
    """Instances of this class must never equal a value under test."""

    def __repr__(self) -> str:
        return "<unrelated instance>"


_UNRELATED = _Unrelated()


def _item_label(label: str | None, group_index: int, item_index: int) -> str:
    text = f"[group {group_index}, item {item_index}]"
    return text if label is None else f"{label} {text}"


def check_equality_groups(*groups: Sequence[Any], label: str | None = None) -> None:
    """Check equality and hashing across groups of values.

    Values within a group must all be equal to each other, and to
    themselves, with matching hashes. Values from different groups must be
    unequal. Every value must also be unequal to None and to an instance of
    an unrelated class.

    Raises:
        AssertionFailure: if any of those relationships does not hold.
        ValueError: if no groups are given, a group is empty or holds None.
    """
    if not groups:
        raise ValueError("At least one equality group is required")
    for group_index, group in enumerate(groups, start=1):
        if len(group) == 0:
            raise ValueError(f"Equality group {group_index} is empty")
        if any(item is None for item in group):
            raise ValueError(f"Equality group {group_index} contains None")

    logger.debug("Checking %d equality groups", len(groups))

    indexed = [
        (group_index, item_index, item)
        for group_index, group in enumerate(groups, start=1)
        for item_index, item in enumerate(group, start=1)
    ]

    for group_index, item_index, item in indexed:
        item_label = _item_label(label, group_index, item_index)
        check_equals_and_hash_code(item, None, False, f"{item_label} vs None")
        check_equals_and_hash_code(
            item, _UNRELATED, False, f"{item_label} vs unrelated instance"
        )

    for group_index, item_index, item in indexed:
        for other_group, other_index, other in indexed:
            pair_label = (
                f"{_item_label(label, group_index, item_index)}"
                f" vs [group {other_group}, item {other_index}]"
            )
            check_equals_and_hash_code(
                item, other, group_index == other_group, pair_label
            )
