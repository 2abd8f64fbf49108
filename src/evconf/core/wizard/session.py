"""Configuration session: the device-level wizard flow.

For one category the session repeatedly:

1. lets the operator pick a template (or "device not listed")
2. asks every template parameter through the prompt engine
3. optionally checks that the device answers on the network; on failure the
   operator may go back to step 1 or keep the values
4. asks whether another device of the same category should be added

Interrupts and prompt failures propagate to the caller.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from evconf.core.catalog import DeviceCategory, Template, used_values
from evconf.core.exceptions import WizardInterrupted

from .device_check import CheckResult, check_tcp
from .engine import PromptEngine
from .rendering import ConfiguredDevice

logger = logging.getLogger(__name__)

DeviceChecker = Callable[[str, int, float], CheckResult]


class ConfigureSession:
    def __init__(
        self,
        engine: PromptEngine,
        *,
        check_devices: bool = True,
        check_timeout: float = 5.0,
        checker: DeviceChecker = check_tcp,
    ) -> None:
        self.engine = engine
        self.check_devices = check_devices
        self.check_timeout = check_timeout
        self.checker = checker
        self.configured: List[ConfiguredDevice] = []

    def run(self, category: DeviceCategory, template_id: Optional[str] = None) -> List[ConfiguredDevice]:
        """Collect devices of ``category`` until the operator is done.

        ``template_id`` skips the first selection prompt.
        """
        preselected = template_id
        while True:
            template = self._choose_template(category, preselected)
            preselected = None
            if template.is_empty:
                self.engine.prompter.notify(self.engine.localizer.localize("Configure_NoDevice"))
                break

            values = self.ask_template_values(template)
            if not self._device_ok(template, values) and self.engine.ask_config_failure_next_step():
                continue

            self.configured.append(ConfiguredDevice(template=template, values=values))
            logger.info("Configured %s device from template %s", category.value, template.template)

            title = self.engine.localizer.localize(category.title_key)
            if not self.engine.ask_yes_no(self.engine.localizer.localize("Configure_Another", {"Title": title})):
                break
        return list(self.configured)

    def ask_template_values(self, template: Template) -> Dict[str, str]:
        """Ask every parameter of ``template`` in declaration order."""
        earlier = [d.values for d in self.configured]
        values: Dict[str, str] = {}
        for param in template.params:
            question = param.to_question(used_values(param, earlier))
            values[param.name] = self.engine.ask_value(question)
        return values

    def _choose_template(self, category: DeviceCategory, template_id: Optional[str]) -> Template:
        if template_id:
            if self.engine.catalog is None:
                raise RuntimeError("template lookup requires a template catalog")
            return self.engine.catalog.find(category, template_id)
        return self.engine.select_item(category)

    def _device_ok(self, template: Template, values: Dict[str, str]) -> bool:
        if not self.check_devices or template.check is None:
            return True
        target = template.check.resolve(values)
        if target is None:
            logger.debug("Skipping device check for %s: no address", template.template)
            return True
        host, port = target
        loc = self.engine.localizer
        self.engine.prompter.notify(loc.localize("TestingDevice", {"Address": f"{host}:{port}"}))
        try:
            result = self.checker(host, port, self.check_timeout)
        except KeyboardInterrupt as err:
            raise WizardInterrupted("Interrupted during device check") from err
        if result.ok:
            self.engine.prompter.notify(loc.localize("TestingDevice_Success"))
            return True
        self.engine.prompter.notify(loc.localize("TestingDevice_Failed", {"Error": result.error}))
        return False


__all__ = ["ConfigureSession", "DeviceChecker"]
