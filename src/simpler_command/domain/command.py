"""
Command lifecycle.

A ``Command`` wraps one unit of work. Subclasses implement ``run()``; callers
invoke it through ``call()`` (instance) or ``invoke()`` (type level) and then
inspect ``success`` / ``failure``, read ``result`` or look at ``errors``.

Expected failures are recorded in ``errors`` by ``run()`` and never raise on
their own. They are escalated to ``CommandFailure`` only when a caller forces
the value out through ``result``, ``call_strict()`` or ``invoke_strict()``.

Instances are not thread-safe: the at-most-once guard is a plain attribute, so
an instance shared between threads must be protected by the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from simpler_command.common.exceptions import CommandFailure, CommandNotImplementedError
from simpler_command.common.string_utils import to_sentence
from simpler_command.domain.errors import ErrorCollection
from simpler_command.interfaces.command_interface import ICommand
from simpler_command.interfaces.error_collection_interface import (
    IErrorCollection,
    errors_to_dict,
)

logger = logging.getLogger(__name__)

C = TypeVar("C", bound="Command")


class CommandState(str, Enum):
    """Lifecycle states of a command."""

    PENDING = "pending"
    RESOLVED = "resolved"


class Command(ICommand):
    """
    Base class for commands.

    Lifecycle state is prepared in ``__new__`` so subclasses are free to define
    their own ``__init__`` without calling ``super().__init__()``:

    ```python
    class AddNumbers(Command):
        def __init__(self, a: int, b: int) -> None:
            self.a = a
            self.b = b

        def run(self) -> int:
            return self.a + self.b

    AddNumbers.invoke_strict(2, 3)  # 5
    ```
    """

    def __new__(cls, *args: Any, **kwargs: Any) -> Command:
        instance = super().__new__(cls)
        instance._state = CommandState.PENDING
        instance._result = None
        instance._errors = None
        return instance

    # Logic -----------------------------------------------------------------

    def run(self) -> Any:
        """Perform the command's work. Must be overridden."""
        raise CommandNotImplementedError(
            f"{type(self).__name__} does not implement run()",
            command_name=type(self).__name__,
        )

    def build_errors(self) -> IErrorCollection:
        """Create the error storage for this command.

        Override to plug in any object offering add, add_all, iteration over
        (field, message) pairs, full_messages and is_empty.
        """
        return ErrorCollection()

    # Execution ---------------------------------------------------------------

    @property
    def implemented(self) -> bool:
        return type(self).run is not Command.run

    def call(self: C, callback: Callable[[Any], Any] | None = None) -> C:
        """Run the command once and return it.

        Repeated calls do not run the logic again. When ``callback`` is given it
        receives ``self.result``, so a failed command raises ``CommandFailure``
        from here instead of reaching the callback.
        """
        if not self.implemented:
            raise CommandNotImplementedError(
                f"{type(self).__name__} does not implement run()",
                command_name=type(self).__name__,
            )

        if self._state is CommandState.PENDING:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Executing command %s", type(self).__name__)
            self._state = CommandState.RESOLVED
            self._result = self.run()
            if logger.isEnabledFor(logging.DEBUG):
                if self.failure:
                    logger.debug(
                        "Command %s failed with %d error(s)",
                        type(self).__name__,
                        len(self.errors.full_messages()),
                    )
                else:
                    logger.debug("Command %s succeeded", type(self).__name__)
        elif logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Command %s already resolved, skipping execution", type(self).__name__
            )

        if callback is not None:
            callback(self.result)

        return self

    def call_strict(self) -> Any:
        """Run the command and return its result, raising if it failed."""
        return self.call().result

    @classmethod
    def invoke(
        cls: type[C],
        *args: Any,
        callback: Callable[[Any], Any] | None = None,
        **kwargs: Any,
    ) -> C:
        """Build a command from ``args`` and run it.

        ``callback`` is reserved by this entry point and is not forwarded to
        the constructor.
        """
        return cls(*args, **kwargs).call(callback)

    @classmethod
    def invoke_strict(cls, *args: Any, **kwargs: Any) -> Any:
        """Build a command from ``args``, run it and return its result."""
        return cls(*args, **kwargs).call_strict()

    # Outcome -----------------------------------------------------------------

    @property
    def state(self) -> CommandState:
        return self._state

    @property
    def executed(self) -> bool:
        return self._state is CommandState.RESOLVED

    @property
    def success(self) -> bool:
        return self.executed and self.errors.is_empty()

    successful = success

    @property
    def failure(self) -> bool:
        return self.executed and not self.errors.is_empty()

    @property
    def result(self) -> Any:
        """The value returned by ``run()``.

        ``None`` before the command has executed; check ``executed`` to tell
        that apart from a command that returned ``None``.

        Raises:
            CommandFailure: If the command executed and recorded errors.
        """
        if self.failure:
            raise CommandFailure(
                to_sentence(self.errors.full_messages()),
                details={"errors": errors_to_dict(self.errors)},
                command_name=type(self).__name__,
            )
        return self._result

    @property
    def errors(self) -> IErrorCollection:
        if self._errors is None:
            self._errors = self.build_errors()
        return self._errors

    def __repr__(self) -> str:
        return f"<{type(self).__name__} state={self._state.value}>"


class FunctionCommand(Command):
    """
    Command wrapping a plain callable and its arguments.

    The callable receives the command as its first argument so it can record
    errors, followed by the captured arguments.
    """

    def __init__(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        self.func = func
        self.args = args
        self.kwargs = kwargs

    def run(self) -> Any:
        return self.func(self, *self.args, **self.kwargs)

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", repr(self.func))
        return f"<FunctionCommand {name} state={self._state.value}>"


class CommandFunction:
    """Factory produced by the ``command`` decorator."""

    def __init__(self, func: Callable[..., Any]) -> None:
        self.func = func
        self.__name__ = getattr(func, "__name__", type(self).__name__)
        self.__doc__ = getattr(func, "__doc__", None)

    def __call__(self, *args: Any, **kwargs: Any) -> FunctionCommand:
        return FunctionCommand(self.func, *args, **kwargs)

    def invoke(
        self,
        *args: Any,
        callback: Callable[[Any], Any] | None = None,
        **kwargs: Any,
    ) -> FunctionCommand:
        return self(*args, **kwargs).call(callback)

    def invoke_strict(self, *args: Any, **kwargs: Any) -> Any:
        return self(*args, **kwargs).call_strict()


def command(func: Callable[..., Any]) -> CommandFunction:
    """Turn ``func(cmd, *args, **kwargs)`` into a command factory.

    ```python
    @command
    def divide(cmd, a, b):
        if b == 0:
            cmd.errors.add("b", "must not be zero")
            return None
        return a / b

    divide.invoke(1, 0).failure  # True
    ```
    """
    return CommandFunction(func)
