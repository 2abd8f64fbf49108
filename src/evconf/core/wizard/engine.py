"""Prompt engine: turns Questions into prompts and accepted answers.

Dispatch by value type:

- BOOL: two-option choice (No/Yes) mapped to "false"/"true"
- CHARGE_MODES: fixed option list mapped to charge mode tokens
- FLOAT / INT / STRING: free text (masked for secrets) gated by the validator

``WizardInterrupted`` and ``PromptTransportError`` raised by the collaborator
propagate unchanged out of every public operation; only validation
rejections are handled here, by asking again.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, NoReturn, Optional, Sequence, Tuple

from evconf.core.exceptions import SelectionMismatchError, ValidationRejection

from .localization import Localizer
from .prompts import PromptCollaborator
from .question import ChargeMode, Question, ValueType
from .validation import ensure_valid

if TYPE_CHECKING:
    from evconf.core.catalog import DeviceCategory, Template, TemplateCatalog

logger = logging.getLogger(__name__)

BOOL_VALUES = ("false", "true")

CHARGE_MODE_CHOICES: Tuple[Tuple[ChargeMode, str], ...] = (
    (ChargeMode.OFF, "ChargeModeOff"),
    (ChargeMode.NOW, "ChargeModeNow"),
    (ChargeMode.MIN_PV, "ChargeModeMinPV"),
    (ChargeMode.PV, "ChargeModePV"),
)


def _assert_never(value: NoReturn) -> NoReturn:
    raise AssertionError(f"Unhandled value type: {value!r}")


class PromptEngine:
    """Ask questions through a ``PromptCollaborator`` until answers are valid."""

    def __init__(
        self,
        prompter: PromptCollaborator,
        localizer: Optional[Localizer] = None,
        catalog: Optional["TemplateCatalog"] = None,
    ) -> None:
        self.prompter = prompter
        self.localizer = localizer or Localizer()
        self.catalog = catalog

    # ---------- Public API ----------
    def ask_value(self, question: Question) -> str:
        """Ask ``question`` and return its canonical string answer."""
        vt = question.value_type
        if vt is ValueType.BOOL:
            return self.ask_bool_value(question.help or question.label)
        if vt is ValueType.CHARGE_MODES:
            return self._ask_charge_mode(question)
        if vt is ValueType.FLOAT or vt is ValueType.INT or vt is ValueType.STRING:
            return self._ask_text(question)
        _assert_never(vt)

    def select(self, message: str, labels: Sequence[str]) -> Tuple[str, int]:
        """Ask for one of ``labels``; return the chosen label and its position."""
        selection = self.prompter.ask_choice(message, list(labels))
        for index, item in enumerate(labels):
            if item == selection:
                return selection, index
        raise SelectionMismatchError(
            f"Selection {selection!r} is not one of the offered options",
            context={"message": message, "selection": selection, "options": list(labels)},
        )

    def ask_choice(self, label: str, choices: Sequence[str]) -> Tuple[int, str]:
        selection, index = self.select(label, choices)
        return index, selection

    def ask_yes_no(self, label: str) -> bool:
        return self.prompter.ask_confirm(label)

    def ask_bool_value(self, label: str) -> str:
        choices = [self._t("Config_No"), self._t("Config_Yes")]
        index, _ = self.ask_choice(label, choices)
        return BOOL_VALUES[index]

    def ask_config_failure_next_step(self) -> bool:
        """Ask whether to pick another device after the current one failed."""
        self.prompter.notify("")
        return self.ask_yes_no(self._t("TestingDevice_RepeatStep"))

    def select_item(self, category: "DeviceCategory") -> "Template":
        """Pick a template of ``category``; the empty template means "not listed"."""
        # Lazy import to avoid circular dependencies
        from evconf.core.catalog import Template

        if self.catalog is None:
            raise RuntimeError("select_item requires a template catalog")

        elements: List[Template] = [e for e in self.catalog.fetch_elements(category) if e.description]
        elements.append(Template(template="", description=self._t("ItemNotPresent")))

        text = f"{self._t('Choose')} {self._t(category.article_key)} {self._t(category.title_key)}:"
        _, index = self.select(text, [e.description for e in elements])
        return elements[index]

    def help_text(self, question: Question) -> str:
        """Compose help + required/optional marker + optional example."""
        marker = self._t("Value_Required") if question.required else self._t("Value_Optional")
        text = f"{question.help} ({marker})".strip()
        if question.example_value:
            text += f" ({self._t('Value_Sample')}: {question.example_value})"
        return text

    # ---------- Internal helpers ----------
    def _t(self, key: str, **params: object) -> str:
        return self.localizer.localize(key, params or None)

    def _ask_charge_mode(self, question: Question) -> str:
        tokens = [mode.value for mode, _ in CHARGE_MODE_CHOICES]
        labels = [self._t(key) for _, key in CHARGE_MODE_CHOICES]
        if not question.exclude_none:
            tokens.append("")
            labels.append(self._t("ChargeModeNone"))
        index, _ = self.ask_choice(self._t("ChargeMode_Question"), labels)
        return tokens[index]

    def _ask_text(self, question: Question) -> str:
        def _hook(candidate: str) -> Optional[str]:
            try:
                ensure_valid(candidate, question, self.localizer)
            except ValidationRejection as rejection:
                return str(rejection)
            return None

        help_text = self.help_text(question)
        default = question.default_value.as_text()
        while True:
            answer = self.prompter.ask_text(
                question.label,
                help_text=help_text,
                default=default,
                masked=question.mask,
                validate=_hook,
            )
            try:
                return ensure_valid(answer, question, self.localizer)
            except ValidationRejection as rejection:
                logger.debug("Rejected answer for %r: %s", question.label, rejection)
                self.prompter.notify(str(rejection))


__all__ = ["PromptEngine", "BOOL_VALUES", "CHARGE_MODE_CHOICES"]
