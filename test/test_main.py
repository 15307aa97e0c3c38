import json
import pathlib
import sys
import typing

import pytest
from loguru import logger

from diffr import adapter, data, main


def test_check_exits_zero_when_changed(diff_file_fixture: pathlib.Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main.run(
        ["check", "--diff-file", str(diff_file_fixture), "--fields", "age", "phone"],
        config=data.Config(),
    )
    assert exit_code == main.EXIT_CHANGED
    assert json.loads(capsys.readouterr().out) is True


def test_check_exits_one_when_unchanged(diff_file_fixture: pathlib.Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main.run(
        ["check", "--diff-file", str(diff_file_fixture), "--fields", "age", "phone", "--match", "all"],
        config=data.Config(),
    )
    assert exit_code == main.EXIT_UNCHANGED
    assert json.loads(capsys.readouterr().out) is False


def test_check_uses_the_configured_match_type(diff_file_fixture: pathlib.Path):
    exit_code = main.run(
        ["check", "--diff-file", str(diff_file_fixture), "--fields", "age", "phone"],
        config=data.Config(default_match_type=data.MatchType.ALL),
    )
    assert exit_code == main.EXIT_UNCHANGED


def test_check_rejects_empty_field_names(diff_file_fixture: pathlib.Path):
    exit_code = main.run(
        ["check", "--diff-file", str(diff_file_fixture), "--fields", ""],
        config=data.Config(),
    )
    assert exit_code == main.EXIT_ERROR


def test_check_missing_diff_file(tmp_path: pathlib.Path):
    exit_code = main.run(
        ["check", "--diff-file", str(tmp_path / "missing.json"), "--fields", "age"],
        config=data.Config(),
    )
    assert exit_code == main.EXIT_ERROR


def test_show(diff_file_fixture: pathlib.Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main.run(["show", "--diff-file", str(diff_file_fixture)], config=data.Config())
    assert exit_code == main.EXIT_CHANGED
    assert json.loads(capsys.readouterr().out)["age"] == [39, 40]


def test_show_field(diff_file_fixture: pathlib.Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main.run(["show", "--diff-file", str(diff_file_fixture), "--field", "first_name"], config=data.Config())
    assert exit_code == main.EXIT_CHANGED
    assert json.loads(capsys.readouterr().out) == ["James", "Jim"]


def test_unrecognized_match_is_an_argparse_error(diff_file_fixture: pathlib.Path):
    with pytest.raises(SystemExit) as exc_info:
        main.run(
            ["check", "--diff-file", str(diff_file_fixture), "--fields", "age", "--match", "most"],
            config=data.Config(),
        )
    assert exc_info.value.code == 2


@pytest.fixture(scope="function")
def error_messages_fixture() -> typing.Generator[list[str], None, None]:
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="ERROR", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(scope="function")
def _restore_logger_fixture() -> typing.Generator[None, None, None]:
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_malformed_diff_file_is_logged_once(write_json_fixture, error_messages_fixture: list[str]):
    diff_file = write_json_fixture("diff.json", {"age": [39]})
    exit_code = main.run(["check", "--diff-file", str(diff_file), "--fields", "age"], config=data.Config())
    assert exit_code == main.EXIT_ERROR
    assert len(error_messages_fixture) == 1, error_messages_fixture
    assert "'age'" in error_messages_fixture[0]


def test_main_writes_errors_to_the_log_folder(
    tmp_path: pathlib.Path,
    write_json_fixture,
    monkeypatch: pytest.MonkeyPatch,
    _restore_logger_fixture: None,
):
    log_folder = tmp_path / "logs"
    log_folder.mkdir()
    diff_file = write_json_fixture("diff.json", {"age": [39]})
    monkeypatch.setattr(adapter.fs, "get_config_path", lambda: tmp_path / "missing.json")
    monkeypatch.setattr(adapter.fs, "get_log_folder", lambda: log_folder)
    monkeypatch.setattr(sys, "argv", ["diffr", "check", "--diff-file", str(diff_file), "--fields", "age"])

    with pytest.raises(SystemExit) as exc_info:
        main.main()

    assert exc_info.value.code == main.EXIT_ERROR
    logger.remove()
    error_log = log_folder / "error.log"
    assert error_log.exists(), "main should add an error.log sink in the log folder."
    lines = [line for line in error_log.read_text().splitlines() if line.strip()]
    assert len(lines) == 1, lines
    assert "An error occurred while checking" in lines[0]
