#!/usr/bin/env python3

"""Tests for the command line entry point."""

import pytest

from overload_activator.domain.models.reflection import INT64
from overload_activator.infrastructure.reflection import constructor
from overload_activator.main import load_target, main, parse_argument


class Widget:
    def __init__(self, name: str, count: int):
        self.name = name
        self.count = count

    def __repr__(self) -> str:
        return f"Widget({self.name!r}, {self.count})"


class Gauge:
    @constructor
    def from_int(self, value: int) -> None:
        self.value = value

    @constructor
    def from_long(self, value: INT64) -> None:
        self.value = value


class Exploding:
    def __init__(self, reason: str):
        raise RuntimeError(reason)


class Outer:
    class Inner:
        pass


NOT_A_CLASS = 42


@pytest.fixture
def cli_env(monkeypatch, tmp_path, reset_logging):
    """Run the CLI from an empty directory with no activator variables set."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "ACTIVATOR_VERBOSE",
        "ACTIVATOR_LOG_DIR",
        "ACTIVATOR_INT_TYPE",
        "ACTIVATOR_FLOAT_TYPE",
    ):
        monkeypatch.delenv(name, raising=False)


def run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


class TestLoadTarget:
    @pytest.mark.unit
    def test_colon_form(self):
        assert load_target(f"{__name__}:Widget") is Widget

    @pytest.mark.unit
    def test_dotted_form(self):
        assert load_target(f"{__name__}.Widget") is Widget

    @pytest.mark.unit
    def test_nested_class(self):
        assert load_target(f"{__name__}:Outer.Inner") is Outer.Inner

    @pytest.mark.unit
    @pytest.mark.parametrize("target", ["Widget", ":Widget", "module:"])
    def test_malformed(self, target):
        with pytest.raises(ValueError):
            load_target(target)

    @pytest.mark.unit
    def test_missing_attribute(self):
        with pytest.raises(ValueError, match="not found"):
            load_target(f"{__name__}:Missing")

    @pytest.mark.unit
    def test_not_a_class(self):
        with pytest.raises(ValueError, match="is not a class"):
            load_target(f"{__name__}:NOT_A_CLASS")

    @pytest.mark.unit
    def test_missing_module(self):
        with pytest.raises(ImportError):
            load_target("no_such_module_for_activator:Thing")


class TestParseArgument:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("3", 3),
            ("2.5", 2.5),
            ("None", None),
            ("True", True),
            ("'quoted'", "quoted"),
            ("plain", "plain"),
            ("1 +", "1 +"),
        ],
    )
    def test_literals_with_string_fallback(self, text, expected):
        assert parse_argument(text) == expected


@pytest.mark.usefixtures("cli_env")
class TestMain:
    @pytest.mark.integration
    def test_constructs_and_prints(self, capsys):
        assert run([f"{__name__}:Widget", "bolt", "3"]) == 0

        assert capsys.readouterr().out.strip() == "Widget('bolt', 3)"

    @pytest.mark.integration
    def test_class_built_through_new(self, capsys):
        assert run(["fractions:Fraction", "3", "4"]) == 0

        assert capsys.readouterr().out.strip() == "Fraction(3, 4)"

    @pytest.mark.integration
    def test_list(self, capsys):
        assert run([f"{__name__}:Widget", "--list"]) == 0

        assert capsys.readouterr().out.splitlines() == ["Widget(String name, Int32 count)"]

    @pytest.mark.integration
    def test_no_matching_constructor(self, capsys):
        assert run([f"{__name__}:Widget", "bolt"]) == 1

        assert "No matching constructor" in capsys.readouterr().err

    @pytest.mark.integration
    def test_int_type_option(self, capsys):
        assert run([f"{__name__}:Gauge", "7"]) == 0
        assert run([f"{__name__}:Gauge", "7", "--int-type", "Int64"]) == 1

        assert "Ambiguous match" in capsys.readouterr().err

    @pytest.mark.integration
    def test_invalid_int_type(self, capsys):
        assert run([f"{__name__}:Widget", "--int-type", "Double"]) == 1

        assert "Configuration error" in capsys.readouterr().err

    @pytest.mark.integration
    def test_unloadable_target(self, capsys):
        assert run(["no_such_module_for_activator:Thing"]) == 1

        assert "Cannot load target" in capsys.readouterr().err

    @pytest.mark.integration
    def test_constructor_failure(self, capsys):
        assert run([f"{__name__}:Exploding", "boom"]) == 1

        assert "Constructor raised RuntimeError: boom" in capsys.readouterr().err
