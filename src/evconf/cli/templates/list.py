"""
evconf templates list command.

SUMMARY: List device templates of a category
"""

from __future__ import annotations

import argparse
import sys

from evconf.cli import OutputFormatter, add_category_arg, add_json_flag, add_repo_root_flag, get_repo_root
from evconf.core.catalog import DeviceCategory, TemplateCatalog
from evconf.core.config import WizardConfig
from evconf.core.exceptions import EvconfError

SUMMARY = "List device templates of a category"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_category_arg(parser)
    parser.add_argument(
        "--params",
        action="store_true",
        help="Show the parameters of each template",
    )
    add_json_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        config = WizardConfig(get_repo_root(args))
        catalog = TemplateCatalog(config.catalog_paths)
        templates = catalog.fetch_elements(DeviceCategory(args.category))
    except EvconfError as e:
        formatter.error(e, error_code="templates_list_error")
        return 1

    if formatter.json_mode:
        formatter.json_output(
            [
                {
                    "template": t.template,
                    "description": t.description,
                    "params": [
                        {"name": p.name, "type": p.value_type.value, "required": p.required}
                        for p in t.params
                    ],
                }
                for t in templates
            ]
        )
        return 0

    if not templates:
        formatter.text(f"No {args.category} templates found.")
        return 0

    width = max(len(t.template) for t in templates)
    for t in templates:
        formatter.text(f"{t.template.ljust(width)}  {t.description}")
        if args.params:
            for p in t.params:
                marker = "*" if p.required else " "
                formatter.text(f"  {marker} {p.name} ({p.value_type.value})")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
