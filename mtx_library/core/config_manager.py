#!/usr/bin/env python3
"""
Менеджер конфигурации с поддержкой YAML и JSON
Валидация по схеме jsonschema, секции changer, mock и logging
"""

import os
import json
import yaml
import logging
from typing import Dict, Any, Optional, List
from pathlib import Path
import jsonschema
from dataclasses import dataclass, asdict
from enum import Enum

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


class ConfigFormat(Enum):
    """Форматы конфигурации"""
    YAML = "yaml"
    JSON = "json"


@dataclass
class ChangerConfig:
    """Конфигурация устройства смены лент"""
    device: str = "/dev/sg3"
    mtx_path: str = "mtx"
    timeout: int = 30
    use_mock: bool = False


@dataclass
class MockConfig:
    """Параметры имитатора библиотеки"""
    drives: int = 8
    storage_slots: int = 32
    mail_slots: int = 4
    volumes: int = 16
    changer_id: str = "/dev/mock"


@dataclass
class LoggingConfig:
    """Конфигурация логирования"""
    level: str = "INFO"
    console_enabled: bool = True
    file_enabled: bool = False
    file: str = "./logs/mtx_library.log"
    max_file_size: int = 10485760
    backup_count: int = 7
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"


SECTIONS = ('changer', 'mock', 'logging')


def default_search_paths() -> List[Path]:
    return [
        Path.cwd() / "mtx_library.yaml",
        Path.cwd() / "mtx_library.yml",
        Path.cwd() / "mtx_library.json",
        Path.home() / ".config" / "mtx_library" / "config.yaml",
        Path("/etc") / "mtx_library" / "config.yaml",
    ]


class LibraryConfig:
    """Основной класс конфигурации mtx_library"""

    CONFIG_SCHEMA = {
        "type": "object",
        "properties": {
            "changer": {
                "type": "object",
                "properties": {
                    "device": {"type": "string", "minLength": 1},
                    "mtx_path": {"type": "string", "minLength": 1},
                    "timeout": {"type": "integer", "minimum": 1},
                    "use_mock": {"type": "boolean"}
                },
                "additionalProperties": False
            },
            "mock": {
                "type": "object",
                "properties": {
                    "drives": {"type": "integer", "minimum": 0},
                    "storage_slots": {"type": "integer", "minimum": 1},
                    "mail_slots": {"type": "integer", "minimum": 0},
                    "volumes": {"type": "integer", "minimum": 0},
                    "changer_id": {"type": "string", "minLength": 1}
                },
                "additionalProperties": False
            },
            "logging": {
                "type": "object",
                "properties": {
                    "level": {"type": "string", "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]},
                    "console_enabled": {"type": "boolean"},
                    "file_enabled": {"type": "boolean"},
                    "file": {"type": "string"},
                    "max_file_size": {"type": "integer", "minimum": 0},
                    "backup_count": {"type": "integer", "minimum": 0},
                    "format": {"type": "string"},
                    "date_format": {"type": "string"}
                },
                "additionalProperties": False
            }
        },
        "additionalProperties": False
    }

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path
        self.config_format: Optional[ConfigFormat] = None

        self.changer = ChangerConfig()
        self.mock = MockConfig()
        self.logging = LoggingConfig()

        if config_path:
            self.load(config_path)

    def load(self, config_path: str) -> None:
        """
        Загрузка конфигурации из файла

        Raises:
            ConfigError: файл не найден, не разбирается или не проходит валидацию
        """
        self.config_path = config_path

        if not os.path.exists(config_path):
            raise ConfigError(f"Файл конфигурации не найден: {config_path}")

        ext = Path(config_path).suffix.lower()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if ext in ['.yaml', '.yml']:
                    data = yaml.safe_load(f)
                    self.config_format = ConfigFormat.YAML
                elif ext == '.json':
                    data = json.load(f)
                    self.config_format = ConfigFormat.JSON
                else:
                    raise ConfigError(
                        f"Неподдерживаемый формат конфигурации: {ext}. "
                        f"Поддерживаются только YAML и JSON."
                    )
        except yaml.YAMLError as e:
            raise ConfigError(f"Ошибка парсинга YAML: {e}")
        except json.JSONDecodeError as e:
            raise ConfigError(f"Ошибка парсинга JSON: {e}")

        self._apply(data or {})
        logger.info(f"Конфигурация загружена: {config_path}")

    def _apply(self, data: Dict[str, Any]) -> None:
        try:
            jsonschema.validate(instance=data, schema=self.CONFIG_SCHEMA)
        except jsonschema.ValidationError as e:
            raise ConfigError(f"Ошибка валидации конфигурации: {e.message}",
                              {"path": list(e.absolute_path)})

        self.changer = ChangerConfig(**{**asdict(self.changer), **data.get('changer', {})})
        self.mock = MockConfig(**{**asdict(self.mock), **data.get('mock', {})})
        self.logging = LoggingConfig(**{**asdict(self.logging), **data.get('logging', {})})

    def save(self, config_path: Optional[str] = None,
             format: ConfigFormat = ConfigFormat.YAML) -> None:
        if config_path:
            self.config_path = config_path
        elif not self.config_path:
            raise ConfigError("Не указан путь для сохранения конфигурации")

        os.makedirs(os.path.dirname(os.path.abspath(self.config_path)), exist_ok=True)

        with open(self.config_path, 'w', encoding='utf-8') as f:
            if format == ConfigFormat.YAML:
                yaml.dump(self.to_dict(), f, default_flow_style=False,
                          allow_unicode=True, indent=2, sort_keys=False)
            else:
                json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

        logger.info(f"Конфигурация сохранена: {self.config_path}")

    def get(self, section: str, key: str, default: Any = None) -> Any:
        section_obj = getattr(self, section, None) if section in SECTIONS else None
        return getattr(section_obj, key, default)

    def set(self, section: str, key: str, value: Any) -> None:
        if section not in SECTIONS:
            raise ConfigError(f"Неизвестная секция конфигурации: {section}")

        data = self.to_dict()
        data[section][key] = value
        self._apply(data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'changer': asdict(self.changer),
            'mock': asdict(self.mock),
            'logging': asdict(self.logging)
        }


def find_config_path() -> Optional[str]:
    for path in default_search_paths():
        if path.exists():
            return str(path)
    return None


def get_config_instance(config_path: Optional[str] = None) -> LibraryConfig:
    """Конфигурация из указанного файла, найденного файла или по умолчанию"""
    if config_path is None:
        config_path = find_config_path()
        if config_path is None:
            logger.debug("Файл конфигурации не найден, используются значения по умолчанию")

    return LibraryConfig(config_path)
