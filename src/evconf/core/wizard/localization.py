"""Localized message lookup backed by bundled YAML catalogs.

Catalogs live in ``evconf/data/i18n/<language>.yaml``. Lookups fall back to
the English catalog and finally to the key itself. Parameters are rendered
with Jinja2 (``{{ Min }}``).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from jinja2 import Environment, StrictUndefined, TemplateError

from evconf.data import file_exists, read_yaml

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en"

_env = Environment(undefined=StrictUndefined, autoescape=False, keep_trailing_newline=False)


class Localizer:
    """Resolve message keys to text in the configured language."""

    def __init__(self, language: str = FALLBACK_LANGUAGE, overrides: Optional[Mapping[str, str]] = None) -> None:
        self.language = language
        self.messages: Dict[str, str] = {}
        self.messages.update(self._load_catalog(FALLBACK_LANGUAGE))
        if language != FALLBACK_LANGUAGE:
            self.messages.update(self._load_catalog(language))
        if overrides:
            self.messages.update(overrides)

    @staticmethod
    def _load_catalog(language: str) -> Dict[str, str]:
        filename = f"{language}.yaml"
        if not file_exists("i18n", filename):
            logger.warning("No message catalog for language %r, using %r", language, FALLBACK_LANGUAGE)
            return {}
        return {str(k): str(v) for k, v in read_yaml("i18n", filename).items()}

    def localize(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        text = self.messages.get(key)
        if text is None:
            logger.debug("Missing message key %s", key)
            return key
        if not params:
            return text
        try:
            return _env.from_string(text).render(**params)
        except TemplateError as err:
            logger.warning("Cannot render message %s: %s", key, err)
            return text

    __call__ = localize


__all__ = ["Localizer", "FALLBACK_LANGUAGE"]
