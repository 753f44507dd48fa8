import json

import pytest
from pydantic import ValidationError

from controlbinding.core.config import BindingSettings, load_settings


def test_defaults_without_file(tmp_path):
    assert load_settings(str(tmp_path / "missing.json")) == BindingSettings()
    assert load_settings() == BindingSettings()


def test_load_json(tmp_path):
    path = tmp_path / "binding.json"
    path.write_text(json.dumps({"meta_prefix": "bind_", "default_mode": "TwoWay"}), encoding="utf-8")

    settings = load_settings(str(path))

    assert settings.meta_prefix == "bind_"
    assert settings.default_mode == "TwoWay"
    assert settings.context_property == "bindingDataSource"


def test_load_toml(tmp_path):
    path = tmp_path / "binding.toml"
    path.write_text('context_property = "ctx"\nlog_level = "debug"\n', encoding="utf-8")

    settings = load_settings(str(path))

    assert settings.context_property == "ctx"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("content", [json.dumps({"meta_prefix": ""}), "{not json"])
def test_invalid_file_keeps_defaults(tmp_path, log_records, content):
    path = tmp_path / "binding.json"
    path.write_text(content, encoding="utf-8")

    assert load_settings(str(path)) == BindingSettings()
    assert any(r["level"].name == "ERROR" for r in log_records)


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError, match="log level"):
        BindingSettings(log_level="LOUD")
