"""
Unit tests for configuration loading and validation.
"""

import json

import pytest
import yaml

from mtx_library.core.config_manager import (
    ConfigFormat,
    LibraryConfig,
    get_config_instance,
)
from mtx_library.core.exceptions import ConfigError
from mtx_library.hardware.factory import ExecutorFactory
from mtx_library.hardware.mock_library import MockLibrary
from mtx_library.hardware.mtx_executor import MtxExecutor


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return str(path)


class TestDefaults:

    def test_defaults(self):
        config = LibraryConfig()

        assert config.changer.device == "/dev/sg3"
        assert config.changer.use_mock is False
        assert config.mock.drives == 8
        assert config.mock.storage_slots == 32
        assert config.mock.mail_slots == 4
        assert config.mock.volumes == 16
        assert config.logging.level == "INFO"

    def test_get(self):
        config = LibraryConfig()

        assert config.get("changer", "timeout") == 30
        assert config.get("changer", "missing", "fallback") == "fallback"
        assert config.get("nosection", "timeout", 5) == 5


class TestLoad:

    def test_yaml_overrides_defaults(self, tmp_path):
        path = write_yaml(tmp_path / "config.yaml", {
            "changer": {"device": "/dev/sg5", "use_mock": True},
            "mock": {"drives": 2},
        })

        config = LibraryConfig(path)

        assert config.config_format == ConfigFormat.YAML
        assert config.changer.device == "/dev/sg5"
        assert config.changer.use_mock is True
        assert config.changer.timeout == 30
        assert config.mock.drives == 2
        assert config.mock.storage_slots == 32

    def test_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logging": {"level": "DEBUG"}}), encoding="utf-8")

        config = LibraryConfig(str(path))

        assert config.config_format == ConfigFormat.JSON
        assert config.logging.level == "DEBUG"

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")

        assert LibraryConfig(str(path)).mock.volumes == 16

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="не найден"):
            LibraryConfig(str(tmp_path / "absent.yaml"))

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text("[changer]\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            LibraryConfig(str(path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("changer: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="YAML"):
            LibraryConfig(str(path))

    @pytest.mark.parametrize("data", [
        {"changer": {"timeout": 0}},
        {"changer": {"timeout": "30"}},
        {"mock": {"drives": -1}},
        {"logging": {"level": "VERBOSE"}},
        {"changer": {"unknown_key": 1}},
        {"unknown_section": {}},
    ])
    def test_schema_violations(self, tmp_path, data):
        path = write_yaml(tmp_path / "config.yaml", data)

        with pytest.raises(ConfigError, match="валидации"):
            LibraryConfig(path)


class TestSaveAndSet:

    def test_save_and_reload(self, tmp_path):
        config = LibraryConfig()
        config.set("mock", "volumes", 4)
        path = str(tmp_path / "nested" / "saved.yaml")

        config.save(path)

        assert LibraryConfig(path).mock.volumes == 4

    def test_save_json(self, tmp_path):
        config = LibraryConfig()
        path = str(tmp_path / "saved.json")

        config.save(path, ConfigFormat.JSON)

        with open(path, encoding="utf-8") as f:
            assert json.load(f)["changer"]["device"] == "/dev/sg3"

    def test_save_without_path(self):
        with pytest.raises(ConfigError):
            LibraryConfig().save()

    def test_set_invalid_value(self):
        config = LibraryConfig()

        with pytest.raises(ConfigError):
            config.set("mock", "drives", "many")
        assert config.mock.drives == 8

    def test_set_unknown_section(self):
        with pytest.raises(ConfigError):
            LibraryConfig().set("robot", "device", "/dev/sg1")


def test_get_config_instance_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        "mtx_library.core.config_manager.default_search_paths",
        lambda: [tmp_path / "mtx_library.yaml"]
    )

    config = get_config_instance()

    assert config.config_path is None
    assert config.changer.device == "/dev/sg3"


def test_get_config_instance_finds_file(tmp_path, monkeypatch):
    path = write_yaml(tmp_path / "mtx_library.yaml", {"changer": {"device": "/dev/sg9"}})
    monkeypatch.setattr(
        "mtx_library.core.config_manager.default_search_paths",
        lambda: [tmp_path / "mtx_library.yaml"]
    )

    config = get_config_instance()

    assert config.config_path == path
    assert config.changer.device == "/dev/sg9"


class TestExecutorFactory:

    def test_mock_from_config(self, tmp_path):
        path = write_yaml(tmp_path / "config.yaml", {
            "changer": {"use_mock": True},
            "mock": {"drives": 2, "storage_slots": 6, "mail_slots": 1, "volumes": 3},
        })

        executor = ExecutorFactory.create_executor(LibraryConfig(path))

        assert isinstance(executor, MockLibrary)
        assert executor.num_drives == 2

    def test_mtx_from_config(self):
        executor = ExecutorFactory.create_executor(LibraryConfig(), device="/dev/sg7")

        assert isinstance(executor, MtxExecutor)
        assert executor.device == "/dev/sg7"
        assert executor.timeout == 30

    def test_override_use_mock(self):
        changer = ExecutorFactory.create_changer(LibraryConfig(), use_mock=True)
        assert changer.num_mail_slots() == 4
