from simpler_command.domain.command import (
    Command,
    CommandFunction,
    CommandState,
    FunctionCommand,
    command,
)
from simpler_command.domain.errors import BASE, ErrorCollection, full_message

__all__ = [
    "BASE",
    "Command",
    "CommandFunction",
    "CommandState",
    "ErrorCollection",
    "FunctionCommand",
    "command",
    "full_message",
]
