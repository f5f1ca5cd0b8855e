from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from simpler_command.interfaces.error_collection_interface import IErrorCollection


class ICommand(ABC):
    """Public surface every command exposes to its callers."""

    @abstractmethod
    def call(self, callback: Callable[[Any], Any] | None = None) -> ICommand:
        pass

    @abstractmethod
    def call_strict(self) -> Any:
        pass

    @property
    @abstractmethod
    def success(self) -> bool:
        pass

    @property
    @abstractmethod
    def failure(self) -> bool:
        pass

    @property
    @abstractmethod
    def result(self) -> Any:
        pass

    @property
    @abstractmethod
    def errors(self) -> IErrorCollection:
        pass
