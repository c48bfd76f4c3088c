"""Tests for configuration loading."""

import pytest
import yaml

from spec_bridge.config import (
    BridgeConfig,
    MatchingConfig,
    load_config_from_yaml,
    save_config_to_yaml,
)
from spec_bridge.exceptions import ConfigurationError


def test_defaults():
    config = BridgeConfig()

    assert config.matching.path_threshold == 0.6
    assert config.matching.parameter_threshold == 0.5
    assert config.matching.field_threshold == 0.4
    assert config.matching.emit_unmapped is False
    assert config.matching.include_empty_groups is False
    assert config.export.default_format == "json"


def test_thresholds_must_be_in_unit_interval():
    with pytest.raises(ValueError):
        MatchingConfig(path_threshold=1.5)
    with pytest.raises(ValueError):
        MatchingConfig(field_threshold=-0.1)


def test_load_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "matching": {"path_threshold": 0.8, "emit_unmapped": True},
                "logging": {"level": "debug"},
                "export": {"default_format": "MARKDOWN"},
            }
        )
    )

    config = load_config_from_yaml(path)

    assert config.matching.path_threshold == 0.8
    assert config.matching.emit_unmapped is True
    assert config.matching.field_threshold == 0.4
    assert config.logging.level == "DEBUG"
    assert config.export.default_format == "markdown"


def test_environment_variables_are_expanded(tmp_path, monkeypatch):
    monkeypatch.setenv("BRIDGE_LOG_FILE", "logs/bridge.log")
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  file: ${BRIDGE_LOG_FILE}\n")

    assert load_config_from_yaml(path).logging.file == "logs/bridge.log"


def test_missing_environment_variable(tmp_path, monkeypatch):
    monkeypatch.delenv("BRIDGE_UNSET_VAR", raising=False)
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  file: ${BRIDGE_UNSET_VAR}\n")

    with pytest.raises(ConfigurationError, match="BRIDGE_UNSET_VAR"):
        load_config_from_yaml(path)


def test_nested_environment_settings(monkeypatch):
    monkeypatch.setenv("SPEC_BRIDGE_MATCHING__FIELD_THRESHOLD", "0.3")
    assert BridgeConfig().matching.field_threshold == 0.3


@pytest.mark.parametrize(
    "content, message",
    [
        ("", "Empty configuration"),
        ("matching: [unclosed", "Invalid YAML"),
        ("- a\n- b\n", "must be a mapping"),
        ("matching:\n  path_threshold: 2\n", "Invalid configuration"),
        ("logging:\n  level: LOUD\n", "Invalid configuration"),
    ],
)
def test_invalid_files(tmp_path, content, message):
    path = tmp_path / "config.yaml"
    path.write_text(content)

    with pytest.raises(ConfigurationError, match=message):
        load_config_from_yaml(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_config_from_yaml(tmp_path / "absent.yaml")


def test_save_and_load(tmp_path):
    config = BridgeConfig(matching=MatchingConfig(path_threshold=0.7))
    path = tmp_path / "nested" / "config.yaml"

    save_config_to_yaml(config, path)

    assert load_config_from_yaml(path).matching.path_threshold == 0.7
