"""Unit tests for persisted configuration."""

import json
import logging

import pytest

from file_mapper.config import (
    CONFIG_ENV_VAR,
    CONFIG_FILE_NAME,
    DEFAULT_IGNORE_PATTERNS,
    ConfigFormatError,
    ConfigManager,
    FileMapperConfig,
    default_config_path,
)


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config" / "file_mapper.json"


def test_default_config():
    config = FileMapperConfig()
    assert config.ignore_patterns == list(DEFAULT_IGNORE_PATTERNS)
    assert "node_modules" in config.ignore_patterns
    # Each instance owns its list
    config.ignore_patterns.append("extra")
    assert "extra" not in FileMapperConfig().ignore_patterns


def test_json_round_trip():
    config = FileMapperConfig(ignore_patterns=["a", "b"])
    assert config.to_json() == {"ignorePatterns": ["a", "b"]}
    assert FileMapperConfig.from_json(config.to_json()) == config


@pytest.mark.parametrize("data", [[], "text", 3, {"ignorePatterns": "build"}, {"ignorePatterns": ["ok", 1]}])
def test_from_json_rejects_bad_shapes(data):
    with pytest.raises(ConfigFormatError):
        FileMapperConfig.from_json(data)


def test_from_json_missing_key_uses_defaults():
    assert FileMapperConfig.from_json({"other": 1}) == FileMapperConfig()
    assert FileMapperConfig.from_json({"ignorePatterns": None}) == FileMapperConfig()


def test_from_json_empty_list_is_respected():
    assert FileMapperConfig.from_json({"ignorePatterns": []}).ignore_patterns == []


def test_default_config_path(monkeypatch, tmp_path):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert default_config_path() == tmp_path / CONFIG_FILE_NAME

    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "custom.json"))
    assert default_config_path() == tmp_path / "custom.json"


def test_manager_uses_env_override(monkeypatch, config_path):
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_path))
    assert ConfigManager().config_path == config_path


def test_load_creates_default_file(config_path, capsys):
    config = ConfigManager(config_path).load_config()
    assert config == FileMapperConfig()
    assert json.loads(config_path.read_text(encoding="utf-8")) == {"ignorePatterns": list(DEFAULT_IGNORE_PATTERNS)}
    assert "Created default configuration file at" in capsys.readouterr().err


def test_load_creates_default_file_quietly(config_path, capsys):
    ConfigManager(config_path).load_config(notify_if_created=False)
    assert config_path.exists()
    assert capsys.readouterr().err == ""


def test_load_existing_file(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text(json.dumps({"ignorePatterns": ["vendor", "tmp"]}), encoding="utf-8")
    assert ConfigManager(config_path).load_config().ignore_patterns == ["vendor", "tmp"]


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"ignorePatterns": 5}'])
def test_load_malformed_file_falls_back(config_path, content, caplog):
    config_path.parent.mkdir(parents=True)
    config_path.write_text(content, encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="file_mapper"):
        config = ConfigManager(config_path).load_config()
    assert config == FileMapperConfig()
    assert any("Using default configuration" in r.getMessage() for r in caplog.records)
    # The broken file is left for the user to fix
    assert config_path.read_text(encoding="utf-8") == content


def test_load_unwritable_location_falls_back(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")
    manager = ConfigManager(blocker / "config.json")
    with caplog.at_level(logging.WARNING, logger="file_mapper"):
        config = manager.load_config()
    assert config == FileMapperConfig()
    assert any("Could not create config file" in r.getMessage() for r in caplog.records)


def test_save_config(config_path):
    manager = ConfigManager(config_path)
    manager.save_config(FileMapperConfig(ignore_patterns=["x"]))
    assert json.loads(config_path.read_text(encoding="utf-8")) == {"ignorePatterns": ["x"]}
    assert manager.load_config().ignore_patterns == ["x"]
