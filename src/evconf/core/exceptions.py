from __future__ import annotations

from typing import Any, Dict, Mapping


class EvconfError(Exception):
    """Base exception for evconf."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class WizardInterrupted(EvconfError):
    """Raised when the operator aborts the interactive session (Ctrl+C).

    Unwinds the whole wizard, not only the current question.
    """


class PromptTransportError(EvconfError, RuntimeError):
    """Raised when the terminal prompt collaborator fails for any other reason."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        EvconfError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


class SelectionMismatchError(EvconfError, LookupError):
    """Raised when a selection prompt returns a value that was never offered."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        EvconfError.__init__(self, message, context=context)
        LookupError.__init__(self, message)


class ValidationRejection(EvconfError, ValueError):
    """An answer was rejected by a question's constraints.

    Never leaves the prompt engine; it is turned into a re-prompt.
    """

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        EvconfError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class CatalogError(EvconfError):
    """Raised when device templates cannot be loaded or resolved."""


class ConfigError(EvconfError):
    """Raised when the wizard configuration is missing or invalid."""


__all__ = [
    "EvconfError",
    "WizardInterrupted",
    "PromptTransportError",
    "SelectionMismatchError",
    "ValidationRejection",
    "CatalogError",
    "ConfigError",
]
