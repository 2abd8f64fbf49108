"""
evconf configure command.

SUMMARY: Interactively configure devices of one category

Walks the operator through template selection and every template parameter,
then prints the resulting YAML block (or writes it with --output).

Exit codes:
    0  configuration finished, or cancelled by the operator (Ctrl+C)
    1  prompt failure, invalid configuration or template catalog
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from evconf.cli import OutputFormatter, add_category_arg, add_json_flag, add_repo_root_flag, get_repo_root
from evconf.core.catalog import DeviceCategory, TemplateCatalog
from evconf.core.config import WizardConfig
from evconf.core.exceptions import EvconfError, PromptTransportError, WizardInterrupted
from evconf.core.stdlib_logging import configure_stdlib_logging, silence_lastresort
from evconf.core.utils import write_text_atomic
from evconf.core.wizard import Localizer, PromptCollaborator, PromptEngine, QuestionaryPrompter
from evconf.core.wizard.rendering import render_devices, section_name
from evconf.core.wizard.session import ConfigureSession

SUMMARY = "Interactively configure devices of one category"

logger = logging.getLogger(__name__)


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_category_arg(parser)
    parser.add_argument(
        "--template",
        type=str,
        help="Skip the device selection and use this template id for the first device",
    )
    parser.add_argument(
        "--language",
        type=str,
        help="Message language (default: from config)",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Write the configuration to this file instead of printing it",
    )
    parser.add_argument(
        "--skip-check",
        action="store_true",
        help="Do not test whether configured devices are reachable",
    )
    add_json_flag(parser)
    add_repo_root_flag(parser)


def build_prompter() -> PromptCollaborator:
    return QuestionaryPrompter()


def _setup_logging(config: WizardConfig) -> None:
    if config.log_file is not None:
        configure_stdlib_logging(log_path=config.log_file, level=config.log_level)
    else:
        silence_lastresort()


def _output_path(args: argparse.Namespace, config: WizardConfig, category: DeviceCategory) -> Optional[Path]:
    if args.output:
        return Path(args.output).expanduser().resolve()
    if config.output_directory is not None:
        return config.output_directory / f"{section_name(category)}.yaml"
    return None


def main(args: argparse.Namespace) -> int:
    """Run the wizard; the only place that maps wizard outcomes to exit codes."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        config = WizardConfig(get_repo_root(args))
        _ = config.data
        _setup_logging(config)
    except (EvconfError, OSError) as e:
        formatter.error(e, error_code="config_error")
        return 1

    localizer = Localizer(args.language or config.language)
    category = DeviceCategory(args.category)
    engine = PromptEngine(
        build_prompter(),
        localizer=localizer,
        catalog=TemplateCatalog(config.catalog_paths),
    )
    session = ConfigureSession(
        engine,
        check_devices=config.device_check_enabled and not args.skip_check,
        check_timeout=config.device_check_timeout,
    )

    try:
        devices = session.run(category, template_id=args.template)
    except WizardInterrupted:
        logger.info("Wizard cancelled by operator")
        formatter.text(localizer.localize("Cancel"))
        return 0
    except PromptTransportError as e:
        logger.error("Prompt failed: %s", e)
        formatter.error(e, f"{localizer.localize('InputError')} {e}", error_code="input_error", prefix="")
        return 1
    except EvconfError as e:
        logger.error("Wizard failed: %s", e)
        formatter.error(e, error_code="configure_error")
        return 1

    if not devices:
        return 0

    document = render_devices(category, devices)
    target = _output_path(args, config, category)
    if target is not None:
        try:
            write_text_atomic(target, document)
        except OSError as e:
            logger.error("Cannot write %s: %s", target, e)
            formatter.error(e, error_code="write_error")
            return 1
        formatter.success(
            {"category": category.value, "path": str(target), "devices": len(devices)},
            localizer.localize("Configure_Written", {"Path": str(target)}),
        )
        return 0

    if formatter.json_mode:
        formatter.json_output({section_name(category): [d.as_config() for d in devices]})
    else:
        formatter.text(document.rstrip())
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
