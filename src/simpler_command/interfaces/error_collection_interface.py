from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable, Iterator
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IErrorSource(Protocol):
    """Anything that can be iterated as (field, message) pairs."""

    def __iter__(self) -> Iterator[tuple[Hashable, str]]:
        ...


class IErrorCollection(ABC):
    """Capability set a command needs from its error storage."""

    @abstractmethod
    def add(self, field: Hashable, message: str) -> None:
        """Record ``message`` against ``field``."""

    @abstractmethod
    def add_all(self, source: IErrorSource | Any) -> None:
        """Merge every message exposed by ``source``."""

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Hashable, str]]:
        """Iterate (field, message) pairs in insertion order."""

    @abstractmethod
    def full_messages(self) -> list[str]:
        """Render every message as a human-readable sentence fragment."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True when no message has been recorded."""

    def to_dict(self) -> dict[Hashable, list[str]]:
        return errors_to_dict(self)


def iter_error_pairs(source: Any) -> Iterable[tuple[Hashable, str]]:
    """Normalize a mapping or pair iterable into (field, message) pairs.

    Mappings may hold a single message, a list of messages or None per field.
    """
    if hasattr(source, "items") and callable(source.items):
        for field, values in source.items():
            if values is None:
                continue
            if isinstance(values, str) or not isinstance(values, Iterable):
                yield field, values
            else:
                for value in values:
                    yield field, value
        return
    for field, message in source:
        yield field, message


def errors_to_dict(errors: Any) -> dict[Hashable, list[str]]:
    """Project any (field, message) iterable into field -> messages."""
    output: dict[Hashable, list[str]] = {}
    for field, message in errors:
        output.setdefault(field, []).append(message)
    return output
