"""Interactive wizard package.

- question: Question model, value types and default variants
- validation: pure answer validation and localized rejection messages
- prompts: prompt collaborator interface and the questionary implementation
- engine: PromptEngine (type dispatch, re-prompting, selection helper)
- localization: message catalog lookup
- device_check / rendering / session: device-level wizard flow
  (import these modules directly; they depend on evconf.core.catalog)
"""
from __future__ import annotations

from .engine import PromptEngine
from .localization import Localizer
from .prompts import PromptCollaborator, QuestionaryPrompter
from .question import (
    BooleanDefault,
    ChargeMode,
    IntegerDefault,
    NoDefault,
    Question,
    StringDefault,
    ValueType,
    default_from,
)
from .validation import RejectKind, ValidationResult, ensure_valid, rejection_message, validate

__all__ = [
    "PromptEngine",
    "Localizer",
    "PromptCollaborator",
    "QuestionaryPrompter",
    "Question",
    "ValueType",
    "ChargeMode",
    "NoDefault",
    "StringDefault",
    "IntegerDefault",
    "BooleanDefault",
    "default_from",
    "RejectKind",
    "ValidationResult",
    "validate",
    "rejection_message",
    "ensure_valid",
]
