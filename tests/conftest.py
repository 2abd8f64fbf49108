import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'evconf' and tests/ importable for helpers
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from evconf.core.stdlib_logging import reset_stdlib_logging_for_tests
from evconf.data import clear_caches


@pytest.fixture(autouse=True)
def _isolated_evconf_env(monkeypatch):
    """Drop EVCONF_* overrides from the developer's shell for every test."""
    for key in list(os.environ):
        if key.startswith("EVCONF_"):
            monkeypatch.delenv(key, raising=False)
    clear_caches()
    yield
    clear_caches()


@pytest.fixture
def reset_logging():
    """Remove handlers installed by configure_stdlib_logging after the test."""
    yield
    reset_stdlib_logging_for_tests()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A repository root whose config disables log files and device checks."""
    cfg_dir = tmp_path / ".evconf"
    cfg_dir.mkdir()
    (cfg_dir / "config.yaml").write_text(
        "logging:\n  file: ''\ndevice_check:\n  enabled: false\n",
        encoding="utf-8",
    )
    return tmp_path
