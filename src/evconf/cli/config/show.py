"""
evconf config show command.

SUMMARY: Show the effective wizard configuration

Displays the merged configuration from bundled defaults, the project's
.evconf/config.yaml and EVCONF_* environment variables.
"""

from __future__ import annotations

import argparse
import sys

import yaml

from evconf.cli import OutputFormatter, add_json_flag, add_repo_root_flag, get_repo_root
from evconf.core.config import ConfigManager
from evconf.core.exceptions import EvconfError

SUMMARY = "Show the effective wizard configuration"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "key",
        nargs="?",
        help="Specific configuration key to show (e.g., 'logging.level')",
    )
    add_json_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    """Show configuration - delegates to ConfigManager."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        config_manager = ConfigManager(get_repo_root(args))
        if args.key:
            value = config_manager.get(args.key)
            if value is None:
                formatter.text(f"Key not found: {args.key}")
                return 1
            data = {args.key: value}
        else:
            data = config_manager.get_all()
    except EvconfError as e:
        formatter.error(e, error_code="config_show_error")
        return 1

    if formatter.json_mode:
        formatter.json_output(data)
    else:
        formatter.text(yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True).rstrip())
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
