import shutil
import tempfile
from pathlib import Path

import pytest

from commander.__main__ import build_commander, find_commander_config, main


@pytest.fixture(autouse=True)
def fake_home(monkeypatch):
    """Redirect Path.home() to a temporary directory for all tests."""
    temp_home = Path(tempfile.mkdtemp())
    monkeypatch.setattr(Path, "home", lambda: temp_home)
    yield temp_home
    shutil.rmtree(temp_home, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_cwd(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("COMMANDER_CONFIG", raising=False)
    monkeypatch.setenv("COMMANDER_LOG_MODE", "cli")
    yield tmp_path


def test_build_commander():
    cmd = build_commander()
    assert cmd.option_count() == 5
    assert [option.short_form for option in cmd.registry] == ["b", "c", "h", "if", "v"]


def test_help_when_no_arguments(capsys):
    assert main(["commander"]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("Options available:")
    assert "--balance, -b" in captured.out
    assert "[no parameter]" in captured.out


def test_help_flag(capsys):
    assert main(["commander", "--help"]) == 0
    assert "Options available:" in capsys.readouterr().out


def test_version_flag(capsys):
    from commander.version import __version__

    assert main(["commander", "-v"]) == 0
    assert f"commander {__version__}" in capsys.readouterr().out


def test_parsed_arguments_table(capsys):
    assert main(["commander", "-c", "3", "--input", "data.txt"]) == 0
    out = capsys.readouterr().out
    assert "Parsed arguments" in out
    assert "Number(3)" in out
    assert "data.txt" in out
    assert "__exec__" in out


def test_invalid_number_exit_code(capsys):
    assert main(["commander", "-c", "many"]) == 2
    captured = capsys.readouterr()
    assert "invalid number value" in captured.err


def test_unsupported_option_reported(capsys):
    assert main(["commander", "-z", "-c", "1"]) == 0
    captured = capsys.readouterr()
    assert "[BAD] O(S): z" in captured.err


def test_find_config_in_cwd(isolated_cwd):
    assert find_commander_config() is None
    config_file = isolated_cwd / "commander.yaml"
    config_file.touch()
    assert find_commander_config().resolve() == config_file.resolve()


def test_config_from_env(monkeypatch, tmp_path, capsys):
    config_file = tmp_path / "extra.toml"
    config_file.write_text('[[options]]\nshort = "n"\nlong = "name"\ntype = "string"\n')
    monkeypatch.setenv("COMMANDER_CONFIG", str(config_file))
    assert find_commander_config() == config_file
    assert main(["commander", "--name", "ada"]) == 0
    assert "ada" in capsys.readouterr().out


def test_bad_config_exit_code(monkeypatch, tmp_path, capsys):
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("options:\n  - short: x\n")
    monkeypatch.setenv("COMMANDER_CONFIG", str(config_file))
    assert main(["commander", "-x"]) == 2
    assert "error:" in capsys.readouterr().err
