"""Command objects that report failures through an error collection."""

from simpler_command.common.exceptions import (
    CommandFailure,
    CommandNotImplementedError,
    SimplerCommandError,
)
from simpler_command.domain.command import (
    Command,
    CommandFunction,
    CommandState,
    FunctionCommand,
    command,
)
from simpler_command.domain.errors import BASE, ErrorCollection

__version__ = "0.1.0"

__all__ = [
    "BASE",
    "Command",
    "CommandFailure",
    "CommandFunction",
    "CommandNotImplementedError",
    "CommandState",
    "ErrorCollection",
    "FunctionCommand",
    "SimplerCommandError",
    "__version__",
    "command",
]
