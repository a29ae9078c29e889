import io

import pytest
from rich.console import Console

from commander import Commander, OptionValueType


@pytest.fixture
def streams():
    return io.StringIO(), io.StringIO()


@pytest.fixture
def cmd(streams):
    out, err = streams
    commander = Commander(console=Console(file=out), error_console=Console(file=err))
    commander.add_option("c", "count", "n", OptionValueType.NUMBER)
    commander.add_option("f", "file", "File to read", OptionValueType.STRING)
    return commander


def test_print_help_matches_render_help(cmd, streams):
    out, _ = streams
    cmd.print_help()
    assert out.getvalue() == cmd.render_help()
    assert "\t--count, -c\t\t[Number]\t\tn\n" in out.getvalue()


def test_diagnostics_go_to_injected_error_console(cmd, streams, capsys):
    out, err = streams
    cmd.parse(["exec", "-z", "stray", "--nope"])
    assert err.getvalue() == "[BAD] O(S): z\n[BAD?] V: stray\n[BAD] O(L): nope\n"
    assert out.getvalue() == ""
    assert capsys.readouterr().err == ""


def test_diagnostic_keeps_tabs_and_control_characters(cmd, streams):
    _, err = streams
    cmd.parse(["exec", "a\tb\rc"])
    assert err.getvalue() == "[BAD?] V: a\tb\rc\n"


@pytest.mark.parametrize(
    "token, expected",
    [
        ("-", "[BAD] O(S): \n"),
        ("--", "[BAD] O(L): \n"),
    ],
)
def test_lone_dashes_are_unsupported_options(cmd, streams, token, expected):
    _, err = streams
    cmd.parse(["exec", token, "-c", "2"])
    assert err.getvalue() == expected
    assert cmd.get_number_option("c") == 2
    assert cmd.arg_count() == 2
