"""
Error collection domain model.

An ``ErrorCollection`` accumulates the (field, message) pairs a command reports
while it runs. Messages are de-duplicated per field and both fields and
messages keep their first-insertion order, so the rendered output is stable.
"""

from __future__ import annotations

import json
from collections.abc import Hashable, Iterator
from typing import Any

from simpler_command.common.string_utils import humanize
from simpler_command.interfaces.error_collection_interface import (
    IErrorCollection,
    iter_error_pairs,
)

BASE = "base"


class ErrorCollection(IErrorCollection):
    """Ordered multi-map from field to its distinct messages."""

    def __init__(self) -> None:
        self._messages: dict[Hashable, list[str]] = {}

    def add(self, field: Hashable, message: str, **_options: Any) -> None:
        messages = self._messages.setdefault(field, [])
        if message not in messages:
            messages.append(message)

    def add_all(self, source: Any) -> None:
        for field, message in iter_error_pairs(source):
            self.add(field, message)

    def __iter__(self) -> Iterator[tuple[Hashable, str]]:
        for field, messages in list(self._messages.items()):
            for message in list(messages):
                yield field, message

    def __getitem__(self, field: Hashable) -> list[str]:
        return list(self._messages.get(field, []))

    def __contains__(self, field: object) -> bool:
        try:
            return bool(self._messages.get(field))  # type: ignore[call-overload]
        except TypeError:
            return False

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ErrorCollection):
            return self._messages == other._messages
        if isinstance(other, dict):
            return self.to_dict() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"<ErrorCollection {self.to_dict()!r}>"

    def is_empty(self) -> bool:
        return not any(self._messages.values())

    def fields(self) -> list[Hashable]:
        return [field for field, messages in self._messages.items() if messages]

    def items(self) -> list[tuple[Hashable, list[str]]]:
        return [(field, list(messages)) for field, messages in self._messages.items()]

    def full_messages(self) -> list[str]:
        return [full_message(field, message) for field, message in self]

    def full_messages_for(self, field: Hashable) -> list[str]:
        return [full_message(field, message) for message in self[field]]

    def to_dict(self) -> dict[Hashable, list[str]]:
        """Project the collection into a plain field -> messages mapping."""
        return {field: list(messages) for field, messages in self._messages.items()}

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(
            {str(field): messages for field, messages in self.to_dict().items()},
            **kwargs,
        )


def full_message(field: Hashable, message: str) -> str:
    """Prefix ``message`` with the humanized field name, except for ``base``."""
    if field == BASE:
        return message
    return f"{humanize(str(field))} {message}"
