"""
Scaffolding for new commands.

Given a command name and optional argument names, writes a ``Command``
subclass skeleton and a matching pytest module.
"""

from __future__ import annotations

import keyword
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from simpler_command.common.exceptions import ScaffoldError
from simpler_command.common.string_utils import to_class_name, to_identifier, to_snake_case
from simpler_command.config.app_config import GeneratorConfig

logger = logging.getLogger(__name__)

COMMAND_TEMPLATE = '''\
from simpler_command import Command


class {class_name}(Command):
    """Describe what {class_name} does."""

    def __init__({init_parameters}) -> None:
{assignments}

    def run(self):
        # Record expected failures with self.errors.add("base", "...")
        return None
'''

TEST_TEMPLATE = '''\
import pytest

from {module} import {class_name}


@pytest.mark.skip(reason="{class_name} has not been implemented yet")
def test_{snake_name}_succeeds() -> None:
    command = {class_name}.invoke({call_arguments})

    assert command.success
    assert command.result is not None


@pytest.mark.skip(reason="{class_name} has not been implemented yet")
def test_{snake_name}_reports_failures() -> None:
    command = {class_name}.invoke({call_arguments})

    assert command.failure
    assert command.errors.full_messages()
'''


@dataclass
class GeneratedFile:
    path: Path
    content: str


@dataclass
class CommandScaffold:
    """Rendered files for one command."""

    class_name: str
    snake_name: str
    arguments: list[str] = field(default_factory=list)
    files: list[GeneratedFile] = field(default_factory=list)


def normalize_arguments(arguments: Sequence[str]) -> list[str]:
    """Turn raw argument names into unique identifiers, preserving order."""
    normalized: list[str] = []
    for raw in arguments:
        name = to_identifier(raw)
        if not name:
            raise ScaffoldError(f"Invalid argument name: {raw!r}")
        if keyword.iskeyword(name) or name == "self":
            raise ScaffoldError(f"Argument name {name!r} is reserved")
        if name in normalized:
            raise ScaffoldError(f"Duplicate argument name: {name!r}")
        normalized.append(name)
    return normalized


def _module_path(directory: str, snake_name: str) -> str:
    parts = [part for part in Path(directory).parts if part not in (".", "")]
    return ".".join([*parts, snake_name])


def render_command(
    name: str,
    arguments: Sequence[str] = (),
    config: GeneratorConfig | None = None,
    *,
    skip_tests: bool = False,
) -> CommandScaffold:
    """Render the command and test skeletons without touching the disk."""
    config = config or GeneratorConfig()
    snake_name = to_snake_case(name)
    class_name = to_class_name(name)
    if not snake_name or not class_name.isidentifier():
        raise ScaffoldError(f"Invalid command name: {name!r}")

    args = normalize_arguments(arguments)
    scaffold = CommandScaffold(class_name=class_name, snake_name=snake_name, arguments=args)

    init_parameters = ", ".join(["self", *args])
    assignments = "\n".join(f"        self.{arg} = {arg}" for arg in args) or "        pass"
    scaffold.files.append(
        GeneratedFile(
            path=Path(config.commands_dir) / f"{snake_name}.py",
            content=COMMAND_TEMPLATE.format(
                class_name=class_name,
                init_parameters=init_parameters,
                assignments=assignments,
            ),
        )
    )

    if not skip_tests:
        scaffold.files.append(
            GeneratedFile(
                path=Path(config.tests_dir) / f"test_{snake_name}.py",
                content=TEST_TEMPLATE.format(
                    module=_module_path(config.commands_dir, snake_name),
                    class_name=class_name,
                    snake_name=snake_name,
                    call_arguments=", ".join(args),
                ),
            )
        )
    return scaffold


def generate_command(
    name: str,
    arguments: Sequence[str] = (),
    config: GeneratorConfig | None = None,
    *,
    root: str | Path = ".",
    skip_tests: bool = False,
    force: bool | None = None,
) -> CommandScaffold:
    """Render the skeletons and write them below ``root``.

    Raises:
        ScaffoldError: If a target exists and ``force`` is off, or a write fails
    """
    config = config or GeneratorConfig()
    overwrite = config.force if force is None else force
    scaffold = render_command(name, arguments, config, skip_tests=skip_tests)
    root_path = Path(root)

    for generated in scaffold.files:
        target = root_path / generated.path
        if target.exists() and not overwrite:
            raise ScaffoldError(
                f"{generated.path} already exists (use --force to overwrite)",
                path=str(target),
            )

    for generated in scaffold.files:
        target = root_path / generated.path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(generated.content, encoding="utf-8")
        except OSError as exc:
            raise ScaffoldError(f"Failed to write {generated.path}: {exc}", path=str(target)) from exc
        logger.info("Created %s", generated.path)
        generated.path = target

    return scaffold
