from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from expandvars import UnboundVariable, expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class EqualitySpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    expected: Any
    actual: Any


class EqualCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    equal: EqualitySpec


class NotEqualCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    not_equal: EqualitySpec


class IsTrueCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    is_true: Any


class IsFalseCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    is_false: Any


class IsNoneCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    is_none: Any


class IsNotNoneCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    is_not_none: Any


class MembershipSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    element: Any
    array: list[Any]


class ContainsCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    contains: MembershipSpec


class DoesNotContainCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    does_not_contain: MembershipSpec


class EmptyCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    empty: list[Any]


class PrefixSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    string: str
    prefix: str


class StartsWithCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    starts_with: PrefixSpec


class SuffixSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    string: str
    suffix: str


class EndsWithCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    ends_with: SuffixSpec


class RangeSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    number: int | float
    minimum: int | float
    maximum: int | float

    @model_validator(mode="after")
    def bounds_must_be_ordered(self) -> RangeSpec:
        if self.minimum > self.maximum:
            raise ValueError(f"minimum {self.minimum} is greater than maximum {self.maximum}")
        return self


class InRangeCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    in_range: RangeSpec


class TypeNameSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    value: Any
    type_name: str = Field(alias="type")


class CheckableTypeCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    is_checkable_type: TypeNameSpec


class PropertySpec(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    target: dict[str, Any] = Field(alias="object")
    property: str


class HasPropertyCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    has_property: PropertySpec


class PropertyValueSpec(PropertySpec):
    expected: Any


class PropertyEqualCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    property_equal: PropertyValueSpec


Check = (
    EqualCheck
    | NotEqualCheck
    | IsTrueCheck
    | IsFalseCheck
    | IsNoneCheck
    | IsNotNoneCheck
    | ContainsCheck
    | DoesNotContainCheck
    | EmptyCheck
    | StartsWithCheck
    | EndsWithCheck
    | InRangeCheck
    | CheckableTypeCheck
    | HasPropertyCheck
    | PropertyEqualCheck
)


class CaseConfig(BaseModel):
    name: str
    checks: list[Check]

    @field_validator("checks")
    @classmethod
    def checks_must_not_be_empty(cls, v: list[Check]) -> list[Check]:
        if not v:
            raise ValueError("checks must not be empty")
        return v


class SuiteConfig(BaseModel):
    name: str
    cases: list[CaseConfig]

    @model_validator(mode="after")
    def cases_must_be_unique(self) -> SuiteConfig:
        if not self.cases:
            raise ValueError("cases must not be empty")
        seen: set[str] = set()
        for case in self.cases:
            if case.name in seen:
                raise ValueError(f"Duplicate case name '{case.name}'")
            seen.add(case.name)
        return self


def _expand(node: Any, missing: list[str]) -> Any:
    """Expand ``${VAR}`` references in every string inside *node*."""
    if isinstance(node, str):
        try:
            return expandvars(node, nounset=True)
        except UnboundVariable:
            missing.append(f"  {node}")
            return node
    if isinstance(node, dict):
        return {k: _expand(v, missing) for k, v in node.items()}
    if isinstance(node, list):
        return [_expand(v, missing) for v in node]
    return node


def load_suite(path: Path) -> SuiteConfig:
    """Load and validate a check suite from a YAML file.

    Raises ValueError listing every unset variable so they can all be fixed
    at once.
    """
    with open(path) as f:
        raw = yaml.safe_load(f)

    missing: list[str] = []
    expanded = _expand(raw or {}, missing)
    if missing:
        details = "\n".join(missing)
        raise ValueError(f"Suite '{path}' references unset environment variables:\n{details}")

    return SuiteConfig(**expanded)
