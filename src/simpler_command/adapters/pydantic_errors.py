"""
Adapter exposing pydantic validation errors as (field, message) pairs.

Lets a command merge the outcome of validating its input with a pydantic model:

```python
try:
    payload = ArticleInput.model_validate(raw)
except ValidationError as exc:
    self.errors.add_all(PydanticErrorSource(exc))
```
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import ValidationError

from simpler_command.domain.errors import BASE


class PydanticErrorSource:
    """Iterates a ``pydantic.ValidationError`` as (field, message) pairs.

    The error location is joined with dots (``address.zip``); errors without a
    location are reported against ``base``.
    """

    def __init__(self, error: ValidationError) -> None:
        self.error = error

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for detail in self.error.errors():
            loc = detail.get("loc") or ()
            field = ".".join(str(part) for part in loc) or BASE
            yield field, detail.get("msg", "is invalid")

    def __len__(self) -> int:
        return self.error.error_count()
