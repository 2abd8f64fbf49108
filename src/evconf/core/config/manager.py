"""
evconf configuration management (YAML layers + EVCONF_* environment overrides).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import jsonschema
import yaml

from evconf.core.exceptions import ConfigError
from evconf.core.utils import deep_merge, read_yaml
from evconf.data import get_data_path, read_json

logger = logging.getLogger(__name__)

PROJECT_CONFIG_DIRNAME = ".evconf"
ENV_PREFIX = "EVCONF_"


class ConfigManager:
    """Load, merge, and validate the wizard configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: EVCONF_<section>__<key>
    2. Project config: <repo-root>/.evconf/config.yaml
    3. Bundled defaults: evconf.data/config/defaults.yaml
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root) if repo_root else Path.cwd()
        self.core_config_path = get_data_path("config", "defaults.yaml")
        self.project_config_dir = self.repo_root / PROJECT_CONFIG_DIRNAME
        self.project_config_path = self.project_config_dir / "config.yaml"

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        # Fail closed: configuration must never silently ignore invalid YAML.
        try:
            data = read_yaml(path, default={}, raise_on_error=path.exists())
        except yaml.YAMLError as err:
            raise ConfigError(f"Invalid YAML in {path}: {err}", context={"path": str(path)}) from err
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file must contain a mapping: {path}", context={"path": str(path)})
        return data

    # ---------- Environment overrides ----------
    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            segs = [seg.lower() for seg in raw.split("__")]
            if not raw or any(seg == "" for seg in segs):
                logger.warning("Ignoring malformed override %s", key)
                continue
            yield segs, self._coerce_type(os.environ[key])

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> Dict[str, Any]:
        for path, value in self._iter_env_overrides():
            cur = cfg
            for part in path[:-1]:
                nxt = cur.get(part)
                if not isinstance(nxt, dict):
                    nxt = {}
                    cur[part] = nxt
                cur = nxt
            cur[path[-1]] = value
        return cfg

    # ---------- Loading ----------
    def validate_schema(self, config: Dict[str, Any]) -> None:
        schema = read_json("schemas", "config.schema.json")
        try:
            jsonschema.validate(instance=config, schema=schema)
        except jsonschema.ValidationError as err:
            location = ".".join(str(p) for p in err.absolute_path) or "<root>"
            raise ConfigError(
                f"Invalid configuration at {location}: {err.message}",
                context={"path": location},
            ) from err

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Return the merged configuration dictionary."""
        cfg = self.load_yaml(self.core_config_path)
        if self.project_config_path.exists():
            logger.debug("Loading project config %s", self.project_config_path)
            cfg = deep_merge(cfg, self.load_yaml(self.project_config_path))
        cfg = self.apply_env_overrides(cfg)
        if validate:
            self.validate_schema(cfg)
        return cfg

    def get_all(self) -> Dict[str, Any]:
        return self.load_config()

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dot-notation key (e.g. ``logging.level``)."""
        cur: Any = self.load_config()
        for part in key.split("."):
            if not isinstance(cur, dict) or part not in cur:
                return default
            cur = cur[part]
        return cur


__all__ = ["ConfigManager", "ENV_PREFIX", "PROJECT_CONFIG_DIRNAME"]
