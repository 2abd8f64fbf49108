"""
Device template catalog for the configuration wizard.

Templates are grouped by category (charger, meter, vehicle) and loaded from
YAML files named ``<category>.yaml``:

- Bundled templates: evconf.data/templates/
- Extra directories: ``catalog.paths`` from the wizard config

A template from a later directory replaces a bundled template with the same
``template`` id.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence

from evconf.core.exceptions import CatalogError
from evconf.core.utils import read_yaml
from evconf.core.wizard.question import Question, ValueType, default_from
from evconf.data import get_data_path

logger = logging.getLogger(__name__)


class DeviceCategory(str, Enum):
    CHARGER = "charger"
    METER = "meter"
    VEHICLE = "vehicle"

    @property
    def article_key(self) -> str:
        return f"Category_{self.value}_Article"

    @property
    def title_key(self) -> str:
        return f"Category_{self.value}_Title"


def _bound(raw: Mapping[str, Any], key: str, param: str) -> int:
    value = raw.get(key) or 0
    try:
        return int(value)
    except (TypeError, ValueError) as err:
        raise CatalogError(
            f"Parameter {param}: {key} must be an integer, got {value!r}",
            context={"param": param, key: value},
        ) from err


@dataclass(frozen=True)
class TemplateParam:
    """One configurable parameter of a device template."""

    name: str
    value_type: ValueType = ValueType.STRING
    description: str = ""
    help: str = ""
    example: str = ""
    default: Any = None
    required: bool = False
    mask: bool = False
    unique: bool = False
    min: int = 0
    max: int = 0
    exclude_none: bool = False

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "TemplateParam":
        name = str(raw.get("name") or "").strip()
        if not name:
            raise CatalogError("Template parameter without a name", context={"param": dict(raw)})
        try:
            value_type = ValueType.parse(raw.get("type"))
        except ValueError as err:
            raise CatalogError(str(err), context={"param": name}) from err
        example = raw.get("example")
        return cls(
            name=name,
            value_type=value_type,
            description=str(raw.get("description") or ""),
            help=str(raw.get("help") or ""),
            example="" if example is None else str(example),
            default=raw.get("default"),
            required=bool(raw.get("required", False)),
            mask=bool(raw.get("mask", False)),
            unique=bool(raw.get("unique", False)),
            min=_bound(raw, "min", name),
            max=_bound(raw, "max", name),
            exclude_none=bool(raw.get("excludenone", False)),
        )

    def to_question(self, invalid_values: Iterable[str] = ()) -> Question:
        """Build the wizard question for this parameter.

        ``invalid_values`` only applies to parameters flagged ``unique``.
        """
        return Question(
            label=self.description or self.name,
            value_type=self.value_type,
            help=self.help,
            default_value=default_from(self.default),
            example_value=self.example,
            invalid_values=frozenset(invalid_values) if self.unique else frozenset(),
            min_number_value=self.min,
            max_number_value=self.max,
            mask=self.mask,
            required=self.required,
            exclude_none=self.exclude_none,
        )


@dataclass(frozen=True)
class DeviceCheck:
    """TCP reachability check: host taken from a param, port literal or param."""

    host_param: str
    port: Any

    def resolve(self, values: Mapping[str, str]) -> Optional[tuple[str, int]]:
        host = values.get(self.host_param, "")
        port_raw = values.get(self.port, self.port) if isinstance(self.port, str) else self.port
        try:
            port = int(port_raw)
        except (TypeError, ValueError):
            return None
        if not host:
            return None
        return host, port


@dataclass(frozen=True)
class Template:
    """A device description with an ordered parameter list.

    The empty template (``template == ""``) stands for "device not listed".
    """

    template: str
    description: str
    params: Sequence[TemplateParam] = field(default_factory=tuple)
    check: Optional[DeviceCheck] = None

    @property
    def is_empty(self) -> bool:
        return not self.template

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Template":
        ident = str(raw.get("template") or "").strip()
        if not ident:
            raise CatalogError("Template entry without a 'template' id", context={"entry": dict(raw)})
        params = tuple(TemplateParam.from_dict(p) for p in (raw.get("params") or []))
        names = [p.name for p in params]
        if len(names) != len(set(names)):
            raise CatalogError(f"Duplicate parameter names in template {ident}", context={"template": ident})
        check_raw = raw.get("check")
        check = None
        if isinstance(check_raw, dict) and check_raw.get("host"):
            check = DeviceCheck(host_param=str(check_raw["host"]), port=check_raw.get("port", 80))
        return cls(
            template=ident,
            description=str(raw.get("description") or ident),
            params=params,
            check=check,
        )


class TemplateCatalog:
    """Load and look up device templates by category."""

    def __init__(self, extra_paths: Optional[Iterable[Path]] = None) -> None:
        self.search_paths: List[Path] = [get_data_path("templates")]
        self.search_paths.extend(Path(p) for p in (extra_paths or []))
        self._cache: Dict[DeviceCategory, List[Template]] = {}

    def fetch_elements(self, category: DeviceCategory) -> List[Template]:
        """Return templates of ``category`` in catalog order."""
        if category not in self._cache:
            self._cache[category] = self._load_category(category)
        return list(self._cache[category])

    def find(self, category: DeviceCategory, template_id: str) -> Template:
        for item in self.fetch_elements(category):
            if item.template == template_id:
                return item
        raise CatalogError(
            f"Unknown {category.value} template: {template_id}",
            context={"category": category.value, "template": template_id},
        )

    def _load_category(self, category: DeviceCategory) -> List[Template]:
        ordered: Dict[str, Template] = {}
        for directory in self.search_paths:
            path = directory / f"{category.value}.yaml"
            if not path.exists():
                continue
            try:
                data = read_yaml(path, default={}, raise_on_error=True)
            except Exception as err:
                raise CatalogError(f"Cannot read templates from {path}: {err}", context={"path": str(path)}) from err
            if not isinstance(data, dict):
                raise CatalogError(f"Template file must contain a mapping: {path}", context={"path": str(path)})
            declared = data.get("category")
            if declared and declared != category.value:
                raise CatalogError(
                    f"{path} declares category {declared!r}, expected {category.value!r}",
                    context={"path": str(path)},
                )
            for raw in data.get("templates") or []:
                item = Template.from_dict(raw)
                if item.template in ordered:
                    logger.debug("Template %s overridden by %s", item.template, path)
                ordered[item.template] = item
        return list(ordered.values())


def used_values(param: TemplateParam, configured: Iterable[Mapping[str, str]]) -> FrozenSet[str]:
    """Collect the values ``param`` already took in earlier configured devices."""
    return frozenset(v[param.name] for v in configured if v.get(param.name))


__all__ = [
    "DeviceCategory",
    "DeviceCheck",
    "Template",
    "TemplateParam",
    "TemplateCatalog",
    "used_values",
]
