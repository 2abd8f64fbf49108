"""Answer validation for wizard questions.

``validate`` is a pure function of the candidate text and the question's
constraints. Rules run in order and stop at the first failure:

1. value already used (``invalid_values``)
2. empty value on a required question
3. empty value on an optional question is accepted as "leave unset"
4. float syntax (FLOAT)
5. integer syntax, then minimum, then maximum (INT); a bound of 0 is ignored
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from evconf.core.exceptions import ValidationRejection

from .localization import Localizer
from .question import Question, ValueType

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(r"[+-]?0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+")
_SIGNED_SPECIAL_FLOATS = {"inf", "infinity"}


class RejectKind(str, Enum):
    VALUE_ALREADY_USED = "ValueAlreadyUsed"
    VALUE_MISSING = "ValueMissing"
    INVALID_FLOAT = "InvalidFloat"
    INVALID_INTEGER = "InvalidInteger"
    BELOW_MINIMUM = "BelowMinimum"
    ABOVE_MAXIMUM = "AboveMaximum"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one candidate.

    ``kind`` is None for an accepted candidate. ``bound`` carries the violated
    limit for BELOW_MINIMUM / ABOVE_MAXIMUM.
    """

    kind: Optional[RejectKind] = None
    bound: Optional[int] = None

    @property
    def accepted(self) -> bool:
        return self.kind is None


ACCEPT = ValidationResult()


def parse_int64(text: str) -> Optional[int]:
    """Parse a base-10 signed 64-bit integer, or return None."""
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def _underscores_ok(text: str) -> bool:
    """Underscores may only separate digits (or follow a hex prefix)."""
    body = text[1:] if text[:1] in ("+", "-") else text
    saw = "^"
    i = 0
    is_hex = False
    if len(body) >= 2 and body[0] == "0" and body[1].lower() in ("b", "o", "x"):
        i = 2
        saw = "0"
        is_hex = body[1].lower() == "x"
    for ch in body[i:]:
        if "0" <= ch <= "9" or (is_hex and ch.lower() in "abcdef"):
            saw = "0"
        elif ch == "_":
            if saw != "0":
                return False
            saw = "_"
        elif saw == "_":
            return False
        else:
            saw = "!"
    return saw != "_"


def parse_float64(text: str) -> Optional[float]:
    """Parse a 64-bit float literal, or return None.

    Accepts decimal/exponent notation, hexadecimal floats, underscores between
    digits, the optionally signed inf/infinity spellings and an unsigned nan.
    Finite literals that overflow are rejected.
    """
    if text.lower() == "nan":
        return math.nan
    body = text[1:] if text[:1] in ("+", "-") else text
    if body.lower() in _SIGNED_SPECIAL_FLOATS:
        return float(text)
    if "_" in text:
        if not _underscores_ok(text):
            return None
        text = text.replace("_", "")
    if _DECIMAL_FLOAT_RE.fullmatch(text):
        value = float(text)
    elif _HEX_FLOAT_RE.fullmatch(text):
        try:
            value = float.fromhex(text)
        except OverflowError:
            return None
    else:
        return None
    if math.isinf(value):
        return None
    return value


def validate(candidate: str, question: Question) -> ValidationResult:
    """Check ``candidate`` against the constraints of ``question``."""
    if candidate in question.invalid_values:
        return ValidationResult(RejectKind.VALUE_ALREADY_USED)

    if candidate == "":
        if question.required:
            return ValidationResult(RejectKind.VALUE_MISSING)
        return ACCEPT

    if question.value_type is ValueType.FLOAT:
        if parse_float64(candidate) is None:
            return ValidationResult(RejectKind.INVALID_FLOAT)

    if question.value_type is ValueType.INT:
        value = parse_int64(candidate)
        if value is None:
            return ValidationResult(RejectKind.INVALID_INTEGER)
        if question.min_number_value != 0 and value < question.min_number_value:
            return ValidationResult(RejectKind.BELOW_MINIMUM, question.min_number_value)
        if question.max_number_value != 0 and value > question.max_number_value:
            return ValidationResult(RejectKind.ABOVE_MAXIMUM, question.max_number_value)

    return ACCEPT


def rejection_message(result: ValidationResult, localizer: Localizer) -> str:
    """Return the localized one-line reason for a rejected result."""
    kind = result.kind
    if kind is None:
        raise ValueError("accepted results carry no rejection message")
    if kind is RejectKind.VALUE_ALREADY_USED:
        return localizer.localize("ValueError_Used")
    if kind is RejectKind.VALUE_MISSING:
        return localizer.localize("ValueError_Empty")
    if kind is RejectKind.INVALID_FLOAT:
        return localizer.localize("ValueError_Float")
    if kind is RejectKind.INVALID_INTEGER:
        return localizer.localize("ValueError_Number")
    if kind is RejectKind.BELOW_MINIMUM:
        return localizer.localize("ValueError_NumberLowerThanMin", {"Min": result.bound})
    if kind is RejectKind.ABOVE_MAXIMUM:
        return localizer.localize("ValueError_NumberBiggerThanMax", {"Max": result.bound})
    raise AssertionError(f"Unhandled rejection kind: {kind!r}")


def ensure_valid(candidate: str, question: Question, localizer: Localizer) -> str:
    """Return ``candidate`` or raise ``ValidationRejection`` with the localized reason."""
    result = validate(candidate, question)
    if not result.accepted:
        raise ValidationRejection(
            rejection_message(result, localizer),
            context={"kind": result.kind.value, "bound": result.bound},
        )
    return candidate


__all__ = [
    "RejectKind",
    "ValidationResult",
    "ACCEPT",
    "parse_int64",
    "parse_float64",
    "validate",
    "rejection_message",
    "ensure_valid",
]
