#!/usr/bin/env python3
"""
Фабрика исполнителей команд mtx
"""

import logging
from typing import Optional

from ..core.changer import Changer, CommandExecutor
from ..core.config_manager import LibraryConfig
from .mock_library import MockLibrary
from .mtx_executor import MtxExecutor

logger = logging.getLogger(__name__)


class ExecutorFactory:
    """Выбор исполнителя (устройство или имитатор) при создании Changer"""

    @staticmethod
    def create_mock(config: LibraryConfig) -> MockLibrary:
        mock = config.mock
        return MockLibrary(
            num_drives=mock.drives,
            num_storage_slots=mock.storage_slots,
            num_mail_slots=mock.mail_slots,
            num_volumes=mock.volumes,
            changer_id=mock.changer_id
        )

    @staticmethod
    def create_mtx(config: LibraryConfig, device: Optional[str] = None) -> MtxExecutor:
        changer = config.changer
        return MtxExecutor(
            device=device or changer.device,
            mtx_path=changer.mtx_path,
            timeout=changer.timeout
        )

    @staticmethod
    def create_executor(config: LibraryConfig, use_mock: Optional[bool] = None,
                        device: Optional[str] = None) -> CommandExecutor:
        """
        Создание исполнителя по конфигурации

        Args:
            config: Конфигурация библиотеки
            use_mock: Переопределить changer.use_mock
            device: Переопределить changer.device
        """
        if use_mock is None:
            use_mock = config.changer.use_mock

        if use_mock:
            logger.info("Используется имитатор библиотеки")
            return ExecutorFactory.create_mock(config)

        logger.info(f"Используется устройство: {device or config.changer.device}")
        return ExecutorFactory.create_mtx(config, device)

    @staticmethod
    def create_changer(config: LibraryConfig, use_mock: Optional[bool] = None,
                       device: Optional[str] = None) -> Changer:
        return Changer(ExecutorFactory.create_executor(config, use_mock, device))
