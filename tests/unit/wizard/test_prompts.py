"""QuestionaryPrompter: argument mapping and error translation."""
from __future__ import annotations

import logging
from typing import Any, Dict, List

import pytest
import questionary

from evconf.core.exceptions import PromptTransportError, WizardInterrupted
from evconf.core.wizard.prompts import QuestionaryPrompter


class _FakeQuestion:
    def __init__(self, answer: Any) -> None:
        self.answer = answer

    def unsafe_ask(self) -> Any:
        if isinstance(self.answer, BaseException):
            raise self.answer
        return self.answer


@pytest.fixture
def recorded(monkeypatch: pytest.MonkeyPatch) -> Dict[str, Any]:
    state: Dict[str, Any] = {"answer": None, "calls": []}

    def _factory(kind: str):
        def _make(message: str, **kwargs: Any) -> _FakeQuestion:
            state["calls"].append({"kind": kind, "message": message, **kwargs})
            return _FakeQuestion(state["answer"])

        return _make

    for kind in ("text", "password", "select", "confirm"):
        monkeypatch.setattr(questionary, kind, _factory(kind))
    return state


def test_text_prompt_arguments(recorded: Dict[str, Any]) -> None:
    recorded["answer"] = "192.0.2.2"
    answer = QuestionaryPrompter().ask_text("Host", help_text="(Required)", default="x")
    assert answer == "192.0.2.2"
    call = recorded["calls"][0]
    assert call["kind"] == "text"
    assert call["default"] == "x"
    assert call["instruction"] == "(Required)"
    assert call["qmark"] == ""


def test_masked_prompt_uses_password(recorded: Dict[str, Any]) -> None:
    recorded["answer"] = "secret"
    assert QuestionaryPrompter().ask_text("Password", masked=True) == "secret"
    assert recorded["calls"][0]["kind"] == "password"
    assert recorded["calls"][0]["instruction"] is None


def test_validate_hook_is_adapted_for_questionary(recorded: Dict[str, Any]) -> None:
    recorded["answer"] = "5"
    QuestionaryPrompter().ask_text("Number", validate=lambda s: None if s == "5" else "bad")
    validator = recorded["calls"][0]["validate"]
    assert validator("5") is True
    assert validator("6") == "bad"


def test_none_answers_become_empty(recorded: Dict[str, Any]) -> None:
    recorded["answer"] = None
    prompter = QuestionaryPrompter()
    assert prompter.ask_text("Host") == ""
    assert prompter.ask_choice("Pick", ["A"]) == ""
    assert prompter.ask_confirm("Sure?") is False


def test_choice_and_confirm(recorded: Dict[str, Any]) -> None:
    prompter = QuestionaryPrompter()
    recorded["answer"] = "B"
    assert prompter.ask_choice("Pick", ("A", "B")) == "B"
    assert recorded["calls"][0]["choices"] == ["A", "B"]
    recorded["answer"] = True
    assert prompter.ask_confirm("Sure?") is True
    assert recorded["calls"][1]["default"] is False


def test_keyboard_interrupt_becomes_wizard_interrupted(recorded: Dict[str, Any]) -> None:
    recorded["answer"] = KeyboardInterrupt()
    with pytest.raises(WizardInterrupted):
        QuestionaryPrompter().ask_choice("Pick", ["A"])


@pytest.mark.parametrize("error", [EOFError(), OSError("Bad file descriptor"), ValueError("boom")])
def test_other_failures_become_transport_errors(recorded: Dict[str, Any], error: Exception) -> None:
    recorded["answer"] = error
    with pytest.raises(PromptTransportError) as exc:
        QuestionaryPrompter().ask_text("Host")
    assert exc.value.context == {"prompt": "text"}
    assert exc.value.__cause__ is error


def test_notify_prints(monkeypatch: pytest.MonkeyPatch) -> None:
    printed: List[str] = []
    monkeypatch.setattr(questionary, "print", lambda message, **kwargs: printed.append(message))
    QuestionaryPrompter().notify("Device reachable.")
    assert printed == ["Device reachable."]


def test_notify_failure_becomes_transport_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def _broken_print(message: str, **kwargs: Any) -> None:
        raise OSError("Bad file descriptor")

    monkeypatch.setattr(questionary, "print", _broken_print)
    with pytest.raises(PromptTransportError) as exc:
        QuestionaryPrompter().notify("Device reachable.")
    assert exc.value.context == {"prompt": "notify"}


def test_transport_errors_are_not_logged_as_errors_here(
    recorded: Dict[str, Any], caplog: pytest.LogCaptureFixture
) -> None:
    recorded["answer"] = EOFError()
    with caplog.at_level(logging.DEBUG, logger="evconf.core.wizard.prompts"):
        with pytest.raises(PromptTransportError):
            QuestionaryPrompter().ask_confirm("Sure?")
    records = [r for r in caplog.records if r.name == "evconf.core.wizard.prompts"]
    assert records
    assert all(r.levelno < logging.ERROR for r in records)
