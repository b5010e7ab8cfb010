from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator, model_validator


def _freeze(value: Any) -> Any:
    """Turn YAML sequences into tuples so values can be hashed."""
    if isinstance(value, Mapping):
        raise ValueError("mappings are not supported as compared values")
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


class EqualsCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    lhs: Any
    rhs: Any
    expected_equal: bool = True
    label: str | None = None

    @field_validator("lhs", "rhs")
    @classmethod
    def freeze_value(cls, v: Any) -> Any:
        return _freeze(v)


class EqualityGroupsCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    groups: list[list[Any]]

    @field_validator("groups")
    @classmethod
    def groups_must_not_be_empty(cls, v: list[list[Any]]) -> list[list[Any]]:
        if not v:
            raise ValueError("groups must not be empty")
        for index, group in enumerate(v, start=1):
            if not group:
                raise ValueError(f"group {index} must not be empty")
            if any(item is None for item in group):
                raise ValueError(f"group {index} must not contain null")
        return [[_freeze(item) for item in group] for group in v]


Check = EqualsCheck | EqualityGroupsCheck


class CheckFile(BaseModel):
    checks: list[Check]

    @field_validator("checks")
    @classmethod
    def checks_must_not_be_empty(cls, v: list[Check]) -> list[Check]:
        if not v:
            raise ValueError("checks must not be empty")
        return v

    @model_validator(mode="after")
    def names_must_be_unique(self) -> CheckFile:
        seen: set[str] = set()
        for check in self.checks:
            if check.name in seen:
                raise ValueError(f"Duplicate check name '{check.name}'")
            seen.add(check.name)
        return self


def load_checks(path: Path) -> CheckFile:
    """Load and validate a check file from YAML."""
    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        raise ValueError(f"Check file is empty: {path}")
    if not isinstance(raw, dict):
        raise ValueError(f"Check file must contain a mapping: {path}")

    return CheckFile(**raw)
