"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse

from evconf.core.catalog import DeviceCategory


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --repo-root flag (project whose .evconf/ config is used)."""
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Override repository root path (default: current directory)",
    )


def add_category_arg(parser: argparse.ArgumentParser) -> None:
    """Add the positional device category argument."""
    parser.add_argument(
        "category",
        choices=[c.value for c in DeviceCategory],
        help="Device category",
    )


__all__ = ["add_json_flag", "add_repo_root_flag", "add_category_arg"]
