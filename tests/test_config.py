import pytest

from commander import Commander, OptionValueType
from commander.config import apply_options, load_raw_options, loader
from commander.exceptions import OptionDefinitionError

YAML_CONFIG = """
options:
  - short: v
    long: version
    description: Show the version of this application
    type: none
  - short: c
    long: count
    description: Amount of times to do something
    type: number
  - short: if
    long: input
"""

TOML_CONFIG = """
[[options]]
short = "b"
long = "balance"
description = "Amount of money in your bank account"
type = "float"
"""


def test_loader_yaml(tmp_path):
    path = tmp_path / "commander.yaml"
    path.write_text(YAML_CONFIG)
    cmd = loader(path)
    assert isinstance(cmd, Commander)
    assert cmd.option_count() == 3
    assert cmd.registry.find_option("c", False).value_type is OptionValueType.NUMBER
    assert cmd.registry.find_option("version", True).value_type is OptionValueType.NO_VALUE
    option = cmd.registry.find_option("if", False)
    assert option.value_type is OptionValueType.STRING
    assert option.description == ""

    cmd.parse(["exec", "--count", "4", "-if", "in.txt"])
    assert cmd.get_number_option("c") == 4
    assert cmd.get_string_option("input", True) == "in.txt"


def test_loader_toml(tmp_path):
    path = tmp_path / "commander.toml"
    path.write_text(TOML_CONFIG)
    cmd = loader(str(path))
    cmd.parse(["exec", "-b", "2.5"])
    assert cmd.get_float_option("b") == 2.5


def test_loader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_loader_bad_path_type():
    with pytest.raises(TypeError):
        loader(42)


def test_loader_unsupported_suffix(tmp_path):
    path = tmp_path / "commander.json"
    path.write_text("{}")
    with pytest.raises(ValueError, match="Unsupported config format"):
        loader(path)


@pytest.mark.parametrize("content", ["- a\n- b\n", "options: 3\n"])
def test_loader_malformed(tmp_path, content):
    path = tmp_path / "commander.yaml"
    path.write_text(content)
    with pytest.raises(ValueError, match="list of options"):
        load_raw_options(path)


def test_empty_options(tmp_path):
    path = tmp_path / "commander.yaml"
    path.write_text("title: nothing\n")
    assert loader(path).option_count() == 0


@pytest.mark.parametrize(
    "entry",
    [
        {"short": "c"},
        {"short": "c", "long": "count", "type": "complex"},
        {"short": "-c", "long": "count"},
        "c",
    ],
)
def test_invalid_entries(entry):
    with pytest.raises(OptionDefinitionError):
        apply_options(Commander(), [entry])


def test_apply_options_extends_existing():
    cmd = Commander().add_option("h", "help")
    apply_options(cmd, [{"short": "c", "long": "count", "type": "int"}])
    assert cmd.option_count() == 2
    assert [option.short_form for option in cmd.registry] == ["c", "h"]
