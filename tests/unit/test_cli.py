"""Tests for the event-builder command line."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from event_builder.cli import main
from event_builder.core.enums import EventCategory, EventType, ParameterType


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _payload(runner: CliRunner, *args: str) -> dict:
    result = runner.invoke(main, ["payload", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


class TestListings:
    def test_categories(self, runner):
        result = runner.invoke(main, ["categories"])
        assert result.exit_code == 0
        assert result.output.split() == [c.value for c in EventCategory]

    def test_types(self, runner):
        result = runner.invoke(main, ["types"])
        assert result.exit_code == 0
        assert set(result.output.split()) == {e.value for e in EventType}

    def test_types_by_category(self, runner):
        result = runner.invoke(main, ["types", "--category", "custom"])
        assert result.output.split() == ["custom_event"]

    def test_types_unknown_category(self, runner):
        result = runner.invoke(main, ["types", "--category", "social"])
        assert result.exit_code == 2

    def test_parameter_types(self, runner):
        result = runner.invoke(main, ["parameter-types"])
        assert result.output.split() == [p.value for p in ParameterType]


class TestPayload:
    def test_default_event(self, runner):
        assert _payload(runner) == {"name": "purchase", "params": {"items": []}}

    def test_builtin_number_and_custom_string(self, runner):
        payload = _payload(
            runner, "purchase", "--param", "value=9.99", "--custom", "coupon=SAVE10",
        )
        assert payload == {
            "name": "purchase",
            "params": {"value": 9.99, "items": [], "coupon": "SAVE10"},
        }

    def test_integer_stays_integer(self, runner):
        payload = _payload(runner, "post_score", "--param", "score=120")
        assert payload["params"] == {"score": 120}

    def test_custom_number(self, runner):
        payload = _payload(runner, "login", "--custom-number", "attempts=3")
        assert payload["params"] == {"attempts": 3}

    def test_custom_event_name(self, runner):
        payload = _payload(runner, "custom_event", "--name", "level_start")
        assert payload == {"name": "level_start", "params": {}}

    def test_items(self, runner):
        items = json.dumps([{"item_id": "SKU_1", "price": 4.5, "color": "red"}])
        payload = _payload(runner, "add_to_cart", "--param", f"items={items}")
        assert payload["params"]["items"] == [
            {"item_id": "SKU_1", "price": 4.5, "color": "red"},
        ]

    def test_name_on_non_custom_fails(self, runner):
        result = runner.invoke(main, ["payload", "login", "--name", "x"])
        assert result.exit_code == 1
        assert "custom events" in result.output

    def test_unknown_event_type(self, runner):
        result = runner.invoke(main, ["payload", "checkout"])
        assert result.exit_code == 2
        assert "unknown event type" in result.output

    def test_unknown_builtin_parameter(self, runner):
        result = runner.invoke(main, ["payload", "login", "--param", "color=red"])
        assert result.exit_code == 2
        assert "unknown parameter 'color'" in result.output

    def test_bad_pair(self, runner):
        result = runner.invoke(main, ["payload", "login", "--custom", "novalue"])
        assert result.exit_code == 2

    def test_bad_number(self, runner):
        result = runner.invoke(main, ["payload", "purchase", "--param", "value=lots"])
        assert result.exit_code == 2

    def test_bad_items_json(self, runner):
        result = runner.invoke(main, ["payload", "purchase", "--param", "items={"])
        assert result.exit_code == 2


class TestConfigOption:
    def test_config_file(self, runner, tmp_path):
        config = tmp_path / "config.toml"
        config.write_text(
            'default_event_type = "login"\n'
            "[output]\n"
            "indent = 0\n"
        )
        result = runner.invoke(main, ["--config", str(config), "payload"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"name": "login", "params": {}}

    def test_missing_config(self, runner, tmp_path):
        result = runner.invoke(main, ["--config", str(tmp_path / "no.toml"), "categories"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_catalog_from_config(self, runner, tmp_path):
        catalog = tmp_path / "catalog.toml"
        catalog.write_text(
            '[events.login]\nname = "signin"\n'
            '[[events.login.parameters]]\nname = "method"\ntype = "optional_string"\n'
        )
        config = tmp_path / "config.toml"
        config.write_text(f'catalog_path = "{catalog.as_posix()}"\n')
        result = runner.invoke(
            main, ["--config", str(config), "payload", "login", "--param", "method=sso"],
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"name": "signin", "params": {"method": "sso"}}

    def test_event_missing_from_catalog(self, runner, tmp_path):
        catalog = tmp_path / "catalog.toml"
        catalog.write_text("[events.login]\n")
        config = tmp_path / "config.toml"
        config.write_text(f'catalog_path = "{catalog.as_posix()}"\n')
        result = runner.invoke(main, ["--config", str(config), "payload", "share"])
        assert result.exit_code == 1
        assert "share" in result.output


class TestNonFiniteInput:
    @pytest.mark.parametrize("raw", ["nan", "inf", "-Infinity"])
    def test_custom_number_rejected(self, runner, raw):
        result = runner.invoke(main, ["payload", "purchase", "--custom-number", f"x={raw}"])
        assert result.exit_code == 2
        assert "finite" in result.output

    def test_builtin_number_rejected(self, runner):
        result = runner.invoke(main, ["payload", "purchase", "--param", "value=nan"])
        assert result.exit_code == 2

    def test_item_extra_field_rejected(self, runner):
        result = runner.invoke(
            main, ["payload", "purchase", "--param", 'items=[{"weight": NaN}]'],
        )
        assert result.exit_code == 2
        assert "finite" in result.output

    def test_float_output_is_strict_json(self, runner):
        result = runner.invoke(main, ["payload", "purchase", "--custom-number", "x=1.5"])
        assert result.exit_code == 0
        payload = json.loads(
            result.output,
            parse_constant=lambda token: pytest.fail(f"non-JSON token {token}"),
        )
        assert payload["params"]["x"] == 1.5


class TestBadCatalogFile:
    def test_bad_parameter_entry_is_reported(self, runner, tmp_path):
        catalog = tmp_path / "catalog.toml"
        catalog.write_text('[events.purchase]\nparameters = ["value"]\n')
        config = tmp_path / "config.toml"
        config.write_text(f'catalog_path = "{catalog.as_posix()}"\n')
        result = runner.invoke(main, ["--config", str(config), "payload"])
        assert result.exit_code == 1
        assert "expected a table" in result.output
