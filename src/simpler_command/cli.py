"""
Command line entry point.

``simpler-command generate PublishArticle article`` writes
``commands/publish_article.py`` and ``tests/commands/test_publish_article.py``.
"""

import argparse
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from simpler_command.common.exceptions import ConfigurationError, SimplerCommandError
from simpler_command.common.logging_utils import LogFormat, configure_logging, get_logger
from simpler_command.config.app_config import AppConfig, LogLevel, load_config
from simpler_command.generators.command_generator import generate_command

logger = get_logger(__name__)


def build_cli_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="simpler-command", description="Scaffold simpler-command commands"
    )
    parser.add_argument("--config", dest="config_file", help="Path to a YAML config file")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=[level.value for level in LogLevel],
        type=str.upper,
    )
    parser.add_argument(
        "--log-format",
        dest="log_format",
        choices=[fmt.value for fmt in LogFormat],
    )
    parser.add_argument("--log-file", dest="log_file")

    subparsers = parser.add_subparsers(dest="action", required=True)
    generate = subparsers.add_parser("generate", help="Generate a command skeleton")
    generate.add_argument("name", help="Command class name, e.g. PublishArticle")
    generate.add_argument("arguments", nargs="*", help="Constructor argument names")
    generate.add_argument("--commands-dir", dest="commands_dir")
    generate.add_argument("--tests-dir", dest="tests_dir")
    generate.add_argument("--root", default=".", help="Project root to write into")
    generate.add_argument("--skip-tests", action="store_true", dest="skip_tests")
    generate.add_argument("--force", action="store_true", default=None)
    return parser


_CLI_OVERRIDES: dict[str, tuple[str, str]] = {
    "log_level": ("logging", "level"),
    "log_format": ("logging", "format"),
    "log_file": ("logging", "log_file"),
    "commands_dir": ("generator", "commands_dir"),
    "tests_dir": ("generator", "tests_dir"),
    "force": ("generator", "force"),
}


def apply_cli_args(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Overlay CLI flags on top of the loaded configuration."""
    data = config.model_dump()
    for attr, (section, key) in _CLI_OVERRIDES.items():
        value = getattr(args, attr, None)
        if value is not None:
            data[section][key] = value
    try:
        return AppConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid configuration",
            details={"errors": exc.errors(include_url=False)},
        ) from exc


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_cli_parser()
    args = parser.parse_args(argv)

    try:
        config = apply_cli_args(load_config(args.config_file), args)
        configure_logging(
            level=config.logging.level.value,
            log_format=config.logging.format,
            log_file=config.logging.log_file,
        )

        if args.action == "generate":
            scaffold = generate_command(
                args.name,
                args.arguments,
                config.generator,
                root=args.root,
                skip_tests=args.skip_tests,
            )
            logger.debug(
                "Generated command",
                command=scaffold.class_name,
                files=[str(f.path) for f in scaffold.files],
            )
            for generated in scaffold.files:
                print(f"create  {generated.path}")
    except SimplerCommandError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        for detail in exc.details.get("errors", []):
            location = ".".join(str(part) for part in detail.get("loc", ()))
            print(f"  {location}: {detail.get('msg')}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
