"""Configuration access for evconf.

``ConfigManager`` merges the YAML layers; ``WizardConfig`` exposes the
typed settings the wizard needs.
"""
from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Any, Dict, List, Optional

from .manager import ENV_PREFIX, PROJECT_CONFIG_DIRNAME, ConfigManager


class WizardConfig:
    """Typed accessor over the merged configuration.

    Usage:
        cfg = WizardConfig(repo_root=Path("/path/to/project"))
        print(cfg.language)
    """

    def __init__(self, repo_root: Optional[Path] = None, data: Optional[Dict[str, Any]] = None) -> None:
        self.manager = ConfigManager(repo_root)
        self._data = data

    @property
    def repo_root(self) -> Path:
        return self.manager.repo_root

    @cached_property
    def data(self) -> Dict[str, Any]:
        if self._data is not None:
            return self._data
        return self.manager.load_config()

    @cached_property
    def language(self) -> str:
        return str(self.data.get("language") or "en")

    @cached_property
    def log_level(self) -> str:
        return str((self.data.get("logging") or {}).get("level") or "INFO").upper()

    @cached_property
    def log_file(self) -> Optional[Path]:
        raw = (self.data.get("logging") or {}).get("file") or ""
        if not raw:
            return None
        return self._resolve(raw)

    @cached_property
    def catalog_paths(self) -> List[Path]:
        paths = (self.data.get("catalog") or {}).get("paths") or []
        return [self._resolve(p) for p in paths]

    @cached_property
    def device_check_enabled(self) -> bool:
        return bool((self.data.get("device_check") or {}).get("enabled", True))

    @cached_property
    def device_check_timeout(self) -> float:
        return float((self.data.get("device_check") or {}).get("timeout_seconds", 5))

    @cached_property
    def output_directory(self) -> Optional[Path]:
        raw = (self.data.get("output") or {}).get("directory") or ""
        return self._resolve(raw) if raw else None

    def _resolve(self, raw: str) -> Path:
        path = Path(raw).expanduser()
        return path if path.is_absolute() else self.repo_root / path


__all__ = ["ConfigManager", "WizardConfig", "ENV_PREFIX", "PROJECT_CONFIG_DIRNAME"]
