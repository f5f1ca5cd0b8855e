"""
Helpers for building human-readable labels and sentences.

Only used to render messages; nothing here should drive program logic.
"""

from __future__ import annotations

from collections.abc import Sequence


def humanize(identifier: str) -> str:
    """Turn an identifier such as ``foo_bar_baz`` into ``Foo bar baz``.

    Dots are treated like underscores so nested field paths read naturally.
    Only the first character is uppercased; acronyms are not detected.
    """
    label = identifier.replace(".", "_").replace("_", " ")
    if not label:
        return label
    return label[0].upper() + label[1:]


def to_sentence(
    items: Sequence[str],
    *,
    words_connector: str = ", ",
    two_words_connector: str = " and ",
    last_word_connector: str = ", and ",
) -> str:
    """Join items into an English list: ``a``, ``a and b``, ``a, b, and c``."""
    count = len(items)
    if count == 0:
        return ""
    if count == 1:
        return items[0]
    if count == 2:
        return f"{items[0]}{two_words_connector}{items[1]}"
    return (
        words_connector.join(items[:-1]) + last_word_connector + items[-1]
    )


def to_snake_case(name: str) -> str:
    """Convert ``PublishArticle`` or ``publish-article`` to ``publish_article``."""
    chars: list[str] = []
    for index, char in enumerate(name):
        if char.isupper():
            prev = name[index - 1] if index > 0 else ""
            nxt = name[index + 1] if index + 1 < len(name) else ""
            if index > 0 and (prev.islower() or prev.isdigit() or (nxt.islower() and prev.isupper())):
                chars.append("_")
            chars.append(char.lower())
        elif char in "- .":
            chars.append("_")
        else:
            chars.append(char)
    snake = "".join(chars)
    while "__" in snake:
        snake = snake.replace("__", "_")
    return snake.strip("_")


def to_class_name(name: str) -> str:
    """Convert ``publish_article`` to ``PublishArticle``.

    Names that are already CamelCase, such as ``HTTPClient``, are kept as given.
    """
    if name[:1].isupper() and name.isalnum():
        return name
    return "".join(part[:1].upper() + part[1:] for part in to_snake_case(name).split("_"))


def to_identifier(name: str) -> str:
    """Normalize an argument name into a valid lowercase Python identifier."""
    cleaned = "".join(c if c.isalnum() else "_" for c in name.strip().lower())
    while "__" in cleaned:
        cleaned = cleaned.replace("__", "_")
    cleaned = cleaned.strip("_")
    if cleaned and cleaned[0].isdigit():
        cleaned = f"arg_{cleaned}"
    return cleaned
