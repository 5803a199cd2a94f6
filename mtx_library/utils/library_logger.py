#!/usr/bin/env python3
"""
Настройка логирования для mtx_library
Консольный вывод и файл с ротацией по размеру
"""

import os
import sys
import logging
import logging.handlers
from typing import Optional

# Уровни логирования для удобства
LOG_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}

ROOT_LOGGER_NAME = 'mtx_library'
COMMAND_LOGGER_NAME = 'mtx_library.commands'

# Команды дольше этого порога отмечаются отдельно
SLOW_COMMAND_SECONDS = 1.0

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(logging_config=None) -> logging.Logger:
    """
    Настройка логгера пакета

    Args:
        logging_config: LoggingConfig из конфигурации или None для значений по умолчанию

    Returns:
        Настроенный логгер mtx_library
    """
    level_name = getattr(logging_config, 'level', 'INFO')
    level = LOG_LEVELS.get(str(level_name).upper(), logging.INFO)
    fmt = getattr(logging_config, 'format', DEFAULT_FORMAT)
    date_fmt = getattr(logging_config, 'date_format', DEFAULT_DATE_FORMAT)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Очищаем существующие обработчики
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=fmt, datefmt=date_fmt)

    if getattr(logging_config, 'console_enabled', True):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    log_file = getattr(logging_config, 'file', '')
    if getattr(logging_config, 'file_enabled', False) and log_file:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(log_dir, exist_ok=True)

        # Ротация по размеру
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file,
            maxBytes=int(getattr(logging_config, 'max_file_size', 10485760)),
            backupCount=int(getattr(logging_config, 'backup_count', 7)),
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    logger.debug(f"Логирование настроено, уровень: {logging.getLevelName(level)}")
    return logger


def log_command(command: str, success: bool = True,
                details: str = "", execution_time: Optional[float] = None):
    """
    Логирование выполнения команды mtx

    Args:
        command: Выполненная команда
        success: Успешно ли выполнена
        details: Детали выполнения
        execution_time: Время выполнения в секундах
    """
    logger = logging.getLogger(COMMAND_LOGGER_NAME)

    status = "УСПЕХ" if success else "ОШИБКА"
    message = f"{status}: {command}"
    if details:
        message += f" | {details}"
    if execution_time is not None:
        message += f" | Время: {execution_time:.2f}с"

    if success:
        logger.info(message)
    else:
        logger.error(message)

    if execution_time is not None and execution_time > SLOW_COMMAND_SECONDS:
        logger.warning(f"Медленная команда '{command[:50]}': {execution_time:.2f}с")
