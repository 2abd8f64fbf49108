"""Shared test helpers for evconf."""
from .prompter import ScriptedPrompter

__all__ = ["ScriptedPrompter"]
