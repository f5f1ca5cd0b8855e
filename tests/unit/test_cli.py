import logging
from pathlib import Path

import pytest
import structlog
from simpler_command.cli import apply_cli_args, build_cli_parser, main
from simpler_command.common.exceptions import ConfigurationError
from simpler_command.config.app_config import AppConfig, LogLevel


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "SIMPLER_COMMAND_LOG_LEVEL",
        "SIMPLER_COMMAND_LOG_FORMAT",
        "SIMPLER_COMMAND_LOG_FILE",
        "SIMPLER_COMMAND_COMMANDS_DIR",
        "SIMPLER_COMMAND_TESTS_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    structlog.reset_defaults()
    logging.basicConfig(level=logging.WARNING, handlers=[logging.NullHandler()], force=True)


def test_parser_requires_an_action():
    with pytest.raises(SystemExit):
        build_cli_parser().parse_args([])


def test_parser_generate_arguments():
    args = build_cli_parser().parse_args(
        ["--log-level", "debug", "generate", "PublishArticle", "article", "--force"]
    )

    assert args.action == "generate"
    assert args.name == "PublishArticle"
    assert args.arguments == ["article"]
    assert args.force is True
    assert args.log_level == "DEBUG"


def test_cli_flags_override_config():
    args = build_cli_parser().parse_args(
        ["--log-level", "error", "generate", "X", "--commands-dir", "services"]
    )

    config = apply_cli_args(AppConfig(), args)

    assert config.logging.level is LogLevel.ERROR
    assert config.generator.commands_dir == "services"
    assert config.generator.tests_dir == "tests/commands"
    assert config.generator.force is False


def test_generate_writes_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["generate", "PublishArticle", "article", "--root", str(tmp_path)])

    assert exit_code == 0
    assert (tmp_path / "commands" / "publish_article.py").exists()
    assert (tmp_path / "tests" / "commands" / "test_publish_article.py").exists()
    assert "create" in capsys.readouterr().out


def test_generate_skip_tests(tmp_path: Path):
    main(["generate", "PublishArticle", "--root", str(tmp_path), "--skip-tests"])

    assert not (tmp_path / "tests").exists()


def test_generate_reads_config_file(tmp_path: Path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("generator:\n  commands_dir: app/commands\n", encoding="utf-8")

    main(["--config", str(config_file), "generate", "PublishArticle", "--root", str(tmp_path)])

    assert (tmp_path / "app" / "commands" / "publish_article.py").exists()


def test_errors_are_reported_with_exit_code(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
):
    main(["generate", "PublishArticle", "--root", str(tmp_path)])

    exit_code = main(["generate", "PublishArticle", "--root", str(tmp_path)])

    assert exit_code == 1
    assert "already exists" in capsys.readouterr().err


def test_invalid_name_is_reported(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["generate", "123", "--root", str(tmp_path)])

    assert exit_code == 1
    assert "Invalid command name" in capsys.readouterr().err


def test_invalid_flag_value_is_reported(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["generate", "Foo", "--root", str(tmp_path), "--commands-dir", "   "])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "Invalid configuration" in err
    assert "generator.commands_dir" in err
    assert not any(tmp_path.iterdir())


def test_apply_cli_args_raises_configuration_error():
    args = build_cli_parser().parse_args(["generate", "Foo", "--tests-dir", " "])

    with pytest.raises(ConfigurationError, match="Invalid configuration") as exc_info:
        apply_cli_args(AppConfig(), args)

    assert exc_info.value.details["errors"]
