import pathlib

import pytest

from unl2csv.config import ConfigError, load_config
from unl2csv.config.model import AutoIncrementDefaultConfig, ConstantDefaultConfig, MigrationConfig


def test_load_config():
    config = load_config(pathlib.Path('config/config.yaml'))
    assert config.project.name
    assert config.project.delimiter == "|"
    assert config.project.input_encoding == "cp850"
    assert len(config.tables) > 100

    fiscal_year = config.tables["geschaeftsjahr"]
    assert fiscal_year.formatters == {
        "gj_gueltigkeit": "date",
        "gj_beginn": "month_day",
        "gj_ende": "month_day",
    }

    cost_types = config.tables["v_kostet_ka"]
    assert cost_types.target_schema == "informix"
    assert cost_types.column_order[0] == "id"
    assert isinstance(cost_types.defaults["id"], AutoIncrementDefaultConfig)
    assert cost_types.defaults["id"].start == 1

    person = config.tables["person"]
    assert isinstance(person.defaults["deleted"], ConstantDefaultConfig)
    assert person.defaults["deleted"].value == ""


def test_load_json_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"tables": {"termin": {"formatters": {"te_datum": "date"}}}}', encoding="utf-8")
    config = load_config(path)
    assert config.tables["termin"].formatters["te_datum"] == "date"
    assert config.project.output_encoding == "utf-16"


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_unknown_formatter_is_rejected(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"tables": {"termin": {"formatters": {"te_datum": "iso"}}}}', encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_duplicate_column_order_is_rejected():
    with pytest.raises(ValueError):
        MigrationConfig.model_validate({"tables": {"t": {"column_order": ["a", "a"]}}})


def test_output_encoding_must_be_utf16():
    with pytest.raises(ValueError):
        MigrationConfig.model_validate({"project": {"output_encoding": "cp850"}})


def test_empty_table_entry_is_allowed():
    config = MigrationConfig.model_validate({"tables": {"hot_gebucht_v": None}})
    assert config.tables["hot_gebucht_v"].column_order is None
