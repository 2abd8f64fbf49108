"""Question model: one typed value to collect from the operator."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet, Union


class ValueType(str, Enum):
    """Closed set of parameter value types understood by the wizard."""

    BOOL = "bool"
    FLOAT = "float"
    INT = "int"
    CHARGE_MODES = "chargemodes"
    STRING = "string"

    @classmethod
    def parse(cls, raw: Any) -> "ValueType":
        """Map a template's ``type`` field to a ValueType (missing -> STRING)."""
        if raw in (None, ""):
            return cls.STRING
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown parameter type: {raw!r}") from None


class ChargeMode(str, Enum):
    """Charge mode tokens written to the rendered configuration."""

    OFF = "off"
    NOW = "now"
    MIN_PV = "minpv"
    PV = "pv"


@dataclass(frozen=True)
class NoDefault:
    def as_text(self) -> str:
        return ""


@dataclass(frozen=True)
class StringDefault:
    value: str

    def as_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntegerDefault:
    value: int

    def as_text(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BooleanDefault:
    value: bool

    def as_text(self) -> str:
        return "true" if self.value else "false"


DefaultValue = Union[NoDefault, StringDefault, IntegerDefault, BooleanDefault]


def default_from(raw: Any) -> DefaultValue:
    """Build the default variant for a raw YAML value.

    bool is checked before int because ``bool`` subclasses ``int``.
    Floats keep their textual form as a string default.
    """
    if raw is None:
        return NoDefault()
    if isinstance(raw, bool):
        return BooleanDefault(raw)
    if isinstance(raw, int):
        return IntegerDefault(raw)
    return StringDefault(str(raw))


@dataclass(frozen=True)
class Question:
    """Declarative description of one value to collect.

    ``min_number_value``/``max_number_value`` are inclusive integer bounds where
    ``0`` means "no bound", so a literal bound of zero cannot be expressed.
    """

    label: str
    value_type: ValueType = ValueType.STRING
    help: str = ""
    default_value: DefaultValue = field(default_factory=NoDefault)
    example_value: str = ""
    invalid_values: FrozenSet[str] = frozenset()
    min_number_value: int = 0
    max_number_value: int = 0
    mask: bool = False
    required: bool = False
    exclude_none: bool = False


__all__ = [
    "ValueType",
    "ChargeMode",
    "NoDefault",
    "StringDefault",
    "IntegerDefault",
    "BooleanDefault",
    "DefaultValue",
    "default_from",
    "Question",
]
