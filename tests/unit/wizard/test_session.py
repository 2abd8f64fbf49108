"""Device-level wizard flow driven by a scripted prompter."""
from __future__ import annotations

from typing import List, Tuple

import pytest

from evconf.core.catalog import DeviceCategory, TemplateCatalog
from evconf.core.exceptions import CatalogError, WizardInterrupted
from evconf.core.wizard.device_check import CheckResult
from evconf.core.wizard.engine import PromptEngine
from evconf.core.wizard.localization import Localizer
from evconf.core.wizard.session import ConfigureSession
from helpers import ScriptedPrompter


class _Checker:
    def __init__(self, *outcomes: bool) -> None:
        self.outcomes = list(outcomes)
        self.calls: List[Tuple[str, int, float]] = []

    def __call__(self, host: str, port: int, timeout: float) -> CheckResult:
        self.calls.append((host, port, timeout))
        ok = self.outcomes.pop(0)
        return CheckResult(address=f"{host}:{port}", ok=ok, error=None if ok else "connection refused")


def _session(prompter: ScriptedPrompter, **kwargs) -> ConfigureSession:
    engine = PromptEngine(prompter, localizer=Localizer("en"), catalog=TemplateCatalog())
    return ConfigureSession(engine, **kwargs)


def test_single_device_with_successful_check() -> None:
    prompter = ScriptedPrompter(
        choices=["go-eCharger (local API)", "Fast"],
        texts=[None, "192.0.2.10", "20"],
        confirms=[False],
    )
    checker = _Checker(True)
    devices = _session(prompter, checker=checker, check_timeout=2.0).run(DeviceCategory.CHARGER)

    assert len(devices) == 1
    assert devices[0].template.template == "go-e"
    assert devices[0].values == {"name": "wallbox", "host": "192.0.2.10", "maxcurrent": "20", "mode": "now"}
    assert checker.calls == [("192.0.2.10", 80, 2.0)]
    assert prompter.notifications == ["Testing connection to 192.0.2.10:80 ...", "Device reachable."]
    assert prompter.calls_of("confirm")[0]["message"] == "Do you want to add another wallbox?"


def test_failed_check_lets_operator_pick_again() -> None:
    prompter = ScriptedPrompter(
        choices=["KEBA KeContact P30", "No", "openWB Pro"],
        texts=["box", "192.0.2.20", "", "box", "192.0.2.21", "1"],
        confirms=[True, False],
    )
    checker = _Checker(False, True)
    devices = _session(prompter, checker=checker).run(DeviceCategory.CHARGER)

    assert [d.template.template for d in devices] == ["openwb-pro"]
    assert devices[0].values["phases"] == "1"
    assert "Device not reachable: connection refused" in prompter.notifications
    assert prompter.calls_of("confirm")[0]["message"] == "Do you want to select another device?"


def test_failed_check_keeps_values_when_operator_declines() -> None:
    prompter = ScriptedPrompter(
        choices=["openWB Pro"],
        texts=["box", "192.0.2.30", ""],
        confirms=[False, False],
    )
    devices = _session(prompter, checker=_Checker(False)).run(DeviceCategory.CHARGER)
    assert len(devices) == 1
    assert devices[0].values == {"name": "box", "host": "192.0.2.30", "phases": ""}


def test_unique_values_of_earlier_devices_are_rejected() -> None:
    prompter = ScriptedPrompter(
        choices=["Demo meter (simulated)", "Demo meter (simulated)"],
        texts=[None, "", None, "second", "100"],
        confirms=[True, False],
    )
    devices = _session(prompter, check_devices=False).run(DeviceCategory.METER)

    assert [d.values["name"] for d in devices] == ["demo", "second"]
    assert prompter.rejections == ["This value is already in use."]


def test_not_listed_device_ends_session() -> None:
    prompter = ScriptedPrompter(choices=["My device is not in this list"])
    devices = _session(prompter).run(DeviceCategory.VEHICLE)
    assert devices == []
    assert prompter.notifications == ["No matching device selected, nothing to configure."]


def test_preselected_template_skips_first_selection() -> None:
    prompter = ScriptedPrompter(texts=["ev", "", "60", ""], choices=[4], confirms=[False])
    devices = _session(prompter).run(DeviceCategory.VEHICLE, template_id="offline")
    assert devices[0].template.template == "offline"
    assert prompter.calls[0]["kind"] == "text"


def test_unknown_preselected_template() -> None:
    with pytest.raises(CatalogError):
        _session(ScriptedPrompter()).run(DeviceCategory.VEHICLE, template_id="nope")


def test_check_skipped_when_disabled_or_not_declared() -> None:
    checker = _Checker()
    prompter = ScriptedPrompter(choices=["Demo wallbox (simulated)", "PV"], texts=[None, "11000"], confirms=[False])
    devices = _session(prompter, checker=checker).run(DeviceCategory.CHARGER)
    assert devices[0].values == {"name": "demo", "power": "11000", "mode": "pv"}
    assert checker.calls == []


def test_interrupt_propagates_out_of_session() -> None:
    prompter = ScriptedPrompter(choices=["openWB Pro"], texts=["box", WizardInterrupted()])
    session = _session(prompter, check_devices=False)
    with pytest.raises(WizardInterrupted):
        session.run(DeviceCategory.CHARGER)
    assert session.configured == []


def test_interrupt_during_device_check_becomes_wizard_interrupted() -> None:
    def _checker(host: str, port: int, timeout: float) -> CheckResult:
        raise KeyboardInterrupt

    prompter = ScriptedPrompter(choices=["openWB Pro"], texts=["box", "192.0.2.40", ""])
    session = _session(prompter, checker=_checker)
    with pytest.raises(WizardInterrupted):
        session.run(DeviceCategory.CHARGER)
    assert session.configured == []
