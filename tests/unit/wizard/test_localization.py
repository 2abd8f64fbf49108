from __future__ import annotations

import logging

import pytest

from evconf.core.wizard.localization import Localizer


def test_english_lookup_and_parameters() -> None:
    loc = Localizer("en")
    assert loc.localize("Config_Yes") == "Yes"
    assert loc.localize("ValueError_NumberLowerThanMin", {"Min": 6}) == "The number must be at least 6."
    assert loc("Config_No") == "No"


def test_german_catalog_overrides_english() -> None:
    de = Localizer("de")
    en = Localizer("en")
    assert de.localize("Config_Yes") != en.localize("Config_Yes")
    assert set(en.messages) <= set(de.messages)


def test_unknown_key_falls_back_to_key() -> None:
    assert Localizer("en").localize("NoSuchKey") == "NoSuchKey"


def test_missing_language_falls_back_to_english(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="evconf.core.wizard.localization"):
        loc = Localizer("xx")
    assert loc.localize("Config_Yes") == "Yes"
    assert "No message catalog" in caplog.text


def test_overrides_take_precedence() -> None:
    loc = Localizer("en", overrides={"Config_Yes": "Yep", "Custom": "Hi {{ Who }}"})
    assert loc.localize("Config_Yes") == "Yep"
    assert loc.localize("Custom", {"Who": "there"}) == "Hi there"


def test_missing_parameter_returns_raw_text() -> None:
    loc = Localizer("en")
    assert loc.localize("ValueError_NumberLowerThanMin", {"Max": 1}) == loc.messages["ValueError_NumberLowerThanMin"]
