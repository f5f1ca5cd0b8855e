import pytest
from simpler_command.common.string_utils import (
    humanize,
    to_class_name,
    to_identifier,
    to_sentence,
    to_snake_case,
)


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("foo", "Foo"),
        ("foo_bar_baz", "Foo bar baz"),
        ("address.zip", "Address zip"),
        ("api_URL", "Api URL"),
        ("", ""),
    ],
)
def test_humanize(identifier: str, expected: str) -> None:
    assert humanize(identifier) == expected


@pytest.mark.parametrize(
    ("items", "expected"),
    [
        ([], ""),
        (["one"], "one"),
        (["one", "two"], "one and two"),
        (["one", "two", "three"], "one, two, and three"),
        (["a", "b", "c", "d"], "a, b, c, and d"),
    ],
)
def test_to_sentence(items: list[str], expected: str) -> None:
    assert to_sentence(items) == expected


def test_to_sentence_custom_connectors() -> None:
    assert (
        to_sentence(["a", "b", "c"], words_connector="; ", last_word_connector=" or ")
        == "a; b or c"
    )


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("PublishArticle", "publish_article"),
        ("EnableMaintainance", "enable_maintainance"),
        ("publish-article", "publish_article"),
        ("publish_article", "publish_article"),
        ("HTTPServer", "http_server"),
        ("Sync2Cloud", "sync2_cloud"),
    ],
)
def test_to_snake_case(name: str, expected: str) -> None:
    assert to_snake_case(name) == expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("publish_article", "PublishArticle"),
        ("publish-article", "PublishArticle"),
        ("PublishArticle", "PublishArticle"),
        ("HTTPClient", "HTTPClient"),
        ("Sync2Cloud", "Sync2Cloud"),
    ],
)
def test_to_class_name(name: str, expected: str) -> None:
    assert to_class_name(name) == expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("article", "article"),
        ("Article Title", "article_title"),
        ("user-id", "user_id"),
        ("2fa", "arg_2fa"),
        ("!!", ""),
    ],
)
def test_to_identifier(name: str, expected: str) -> None:
    assert to_identifier(name) == expected
