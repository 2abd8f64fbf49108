"""Terminal prompt collaborators.

``PromptCollaborator`` is the interface the prompt engine talks to; swap it
out to drive the wizard from tests or another front end.
``QuestionaryPrompter`` renders prompts with questionary.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Sequence

import questionary

from evconf.core.exceptions import PromptTransportError, WizardInterrupted

logger = logging.getLogger(__name__)

# Returns None to accept a candidate, or the message to show when rejecting it.
ValidateHook = Callable[[str], Optional[str]]


class PromptCollaborator(ABC):
    """Interactive prompt primitives.

    Every method blocks until the operator answers. Implementations raise
    ``WizardInterrupted`` when the operator aborts and ``PromptTransportError``
    for any other failure of the terminal.
    """

    @abstractmethod
    def ask_text(
        self,
        message: str,
        help_text: str = "",
        default: str = "",
        masked: bool = False,
        validate: Optional[ValidateHook] = None,
    ) -> str:
        """Ask for free text (concealed when ``masked``)."""

    @abstractmethod
    def ask_choice(self, message: str, options: Sequence[str]) -> str:
        """Ask for exactly one of ``options`` and return it."""

    @abstractmethod
    def ask_confirm(self, message: str) -> bool:
        """Ask a yes/no confirmation."""

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show a one-line message to the operator."""


@contextmanager
def _translate_errors(kind: str) -> Iterator[None]:
    try:
        yield
    except KeyboardInterrupt as err:
        raise WizardInterrupted("Interrupted by operator") from err
    except (WizardInterrupted, PromptTransportError):
        raise
    except Exception as err:
        logger.debug("%s prompt failed: %s", kind, err)
        raise PromptTransportError(str(err) or err.__class__.__name__, context={"prompt": kind}) from err


class QuestionaryPrompter(PromptCollaborator):
    """PromptCollaborator rendering with questionary (prompt_toolkit)."""

    qmark = ""

    def ask_text(
        self,
        message: str,
        help_text: str = "",
        default: str = "",
        masked: bool = False,
        validate: Optional[ValidateHook] = None,
    ) -> str:
        def _validator(text: str) -> bool | str:
            if validate is None:
                return True
            verdict = validate(text)
            return True if verdict is None else verdict

        factory = questionary.password if masked else questionary.text
        with _translate_errors("password" if masked else "text"):
            answer = factory(
                message,
                default=default,
                validate=_validator,
                qmark=self.qmark,
                instruction=help_text or None,
            ).unsafe_ask()
        return "" if answer is None else str(answer)

    def ask_choice(self, message: str, options: Sequence[str]) -> str:
        with _translate_errors("select"):
            answer = questionary.select(message, choices=list(options), qmark=self.qmark).unsafe_ask()
        return "" if answer is None else str(answer)

    def ask_confirm(self, message: str) -> bool:
        with _translate_errors("confirm"):
            answer = questionary.confirm(message, default=False, qmark=self.qmark).unsafe_ask()
        return bool(answer)

    def notify(self, message: str) -> None:
        with _translate_errors("notify"):
            questionary.print(message, style="fg:ansired")


__all__ = ["PromptCollaborator", "QuestionaryPrompter", "ValidateHook"]
