"""Render configured devices as a YAML configuration block."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

import yaml

from evconf.core.catalog import DeviceCategory, Template


@dataclass
class ConfiguredDevice:
    template: Template
    values: Dict[str, str] = field(default_factory=dict)

    def as_config(self) -> Dict[str, Any]:
        """Config entry: name first, then type/template, then non-empty values."""
        entry: Dict[str, Any] = {}
        if self.values.get("name"):
            entry["name"] = self.values["name"]
        entry["type"] = "template"
        entry["template"] = self.template.template
        for param in self.template.params:
            value = self.values.get(param.name, "")
            if param.name == "name" or value == "":
                continue
            entry[param.name] = value
        return entry


def section_name(category: DeviceCategory) -> str:
    return f"{category.value}s"


def render_devices(category: DeviceCategory, devices: Sequence[ConfiguredDevice]) -> str:
    """Return the YAML document for ``devices`` under the category's section."""
    entries: List[Dict[str, Any]] = [d.as_config() for d in devices]
    return yaml.safe_dump({section_name(category): entries}, sort_keys=False, allow_unicode=True)


__all__ = ["ConfiguredDevice", "render_devices", "section_name"]
