"""Unit tests for logging utilities."""

import json
import logging

import pytest
import structlog
from simpler_command.common.logging_utils import (
    EnvironmentTaggingFilter,
    EnvironmentTaggingFormatter,
    LogFormat,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    structlog.reset_defaults()
    logging.basicConfig(level=logging.WARNING, handlers=[logging.NullHandler()], force=True)


def test_environment_tagging_filter_tags_records_as_test():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)

    assert EnvironmentTaggingFilter().filter(record) is True
    assert record.env_tag == "test"


def test_environment_tagging_formatter_includes_tag():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
    EnvironmentTaggingFilter().filter(record)

    output = EnvironmentTaggingFormatter().format(record)

    assert "[test]" in output
    assert "hello" in output


def test_configure_logging_sets_level_from_name():
    configure_logging(level="debug")

    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_unknown_level_falls_back_to_info():
    configure_logging(level="chatty")

    assert logging.getLogger().level == logging.INFO


def test_configure_logging_writes_json_to_file(tmp_path):
    log_file = tmp_path / "app.log"
    configure_logging(level=logging.INFO, log_format=LogFormat.JSON, log_file=str(log_file))

    get_logger("simpler_command.test").info("generated", command="PublishArticle")
    for handler in logging.getLogger().handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    payload = json.loads(line[line.index("{"):])
    assert payload["event"] == "generated"
    assert payload["command"] == "PublishArticle"
    assert payload["env"] == "test"


def test_configure_logging_accepts_format_strings():
    configure_logging(log_format="console")

    assert get_logger("x") is not None
