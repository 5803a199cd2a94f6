#!/usr/bin/env python3
"""
mtx-library - управление ленточной библиотекой из командной строки
"""

import sys
import argparse
import logging
from typing import List, Optional

from . import __version__
from .core.changer import Changer
from .core.config_manager import LibraryConfig, get_config_instance
from .core.exceptions import ArgumentError, TapeLibraryError
from .core.models import Slot
from .hardware.factory import ExecutorFactory
from .utils.dependencies import DependencyChecker
from .utils.library_logger import setup_logging

COMMANDS = ['status', 'drives', 'slots', 'load', 'unload', 'transfer',
            'find', 'check', 'version']


class LibraryControl:
    """Команды управления библиотекой"""

    def __init__(self, config: LibraryConfig, use_mock: Optional[bool] = None,
                 device: Optional[str] = None):
        self.config = config
        self.logger = logging.getLogger(__name__)
        self.use_mock = config.changer.use_mock if use_mock is None else use_mock
        self.changer: Changer = ExecutorFactory.create_changer(config, self.use_mock, device)
        self.logger.debug(f"Инициализировано управление библиотекой (mock={self.use_mock})")

    @staticmethod
    def _print_slots(title: str, slots: List[Slot]):
        print(f"\n{title}:")
        if not slots:
            print("  (нет)")
        for slot in slots:
            if slot.volume is None:
                print(f"  {slot.num:>4}  Пусто")
            else:
                print(f"  {slot.num:>4}  📼 {slot.volume.serial} (дом: {slot.volume.home})")

    def show_status(self) -> bool:
        inventory = self.changer.status()

        print("=" * 60)
        print(f"Библиотека: {inventory.changer_id}")
        print("=" * 60)
        print(f"  Приводов: {inventory.max_drives}")
        print(f"  Слотов: {inventory.num_slots} "
              f"(хранение: {inventory.num_storage_slots}, почтовых: {inventory.num_mail_slots})")
        print(f"  Кассет: {len(inventory.volumes())}")

        self._print_slots("💾 Приводы", inventory.drives)
        self._print_slots("🗄️  Слоты хранения", inventory.storage_slots)
        self._print_slots("📬 Почтовые слоты", inventory.mail_slots)
        return True

    def show_drives(self) -> bool:
        self._print_slots("💾 Приводы", self.changer.drives())
        return True

    def show_slots(self) -> bool:
        self._print_slots("🗄️  Слоты", self.changer.slots())
        return True

    def load(self, slot_num: int, drive_num: int) -> bool:
        self.changer.load(slot_num, drive_num)
        print(f"✅ Кассета из слота {slot_num} загружена в привод {drive_num}")
        return True

    def unload(self, drive_num: int, slot_num: int = 0) -> bool:
        self.changer.unload(slot_num, drive_num)
        target = f"слот {slot_num}" if slot_num else "домашний слот"
        print(f"✅ Кассета из привода {drive_num} выгружена в {target}")
        return True

    def transfer(self, from_slot: int, to_slot: int) -> bool:
        self.changer.transfer(from_slot, to_slot)
        print(f"✅ Кассета перемещена из слота {from_slot} в слот {to_slot}")
        return True

    def find(self, serial: str) -> bool:
        slot = self.changer.find_volume(serial)
        if slot is None:
            print(f"❌ Кассета {serial} не найдена")
            return False

        print(f"📼 {serial}: {slot.type}[{slot.num}]")
        return True

    def check(self) -> bool:
        mtx_path = self.config.changer.mtx_path
        ok = DependencyChecker.check_all(mtx_path)
        if ok:
            print(f"ℹ️  {DependencyChecker.get_tool_version(mtx_path)}")
        return ok

    def version(self) -> bool:
        print(f"mtx-library v{__version__}")
        print(f"Python: {sys.version.split()[0]}")
        print(f"Config: {self.config.config_path or 'по умолчанию'}")
        print(f"Mock: {'Yes' if self.use_mock else 'No'}")
        return True


def _int_args(values: List[str], names: List[str]) -> List[int]:
    try:
        return [int(value) for value in values]
    except ValueError:
        raise ArgumentError(f"Аргументы {', '.join(names)} должны быть целыми числами")


def run_command(system: LibraryControl, command: str, args: List[str]) -> bool:
    if command == 'status':
        return system.show_status()

    if command == 'drives':
        return system.show_drives()

    if command == 'slots':
        return system.show_slots()

    if command in ('load', 'transfer'):
        names = ['SLOT', 'DRIVE'] if command == 'load' else ['FROM', 'TO']
        if len(args) != 2:
            print(f"❌ Ошибка: для {command} требуются {' и '.join(names)}")
            return False
        first, second = _int_args(args, names)
        if command == 'load':
            return system.load(first, second)
        return system.transfer(first, second)

    if command == 'unload':
        if len(args) not in (1, 2):
            print("❌ Ошибка: для unload требуется DRIVE [SLOT]")
            return False
        values = _int_args(args, ['DRIVE', 'SLOT'])
        return system.unload(*values)

    if command == 'find':
        if len(args) != 1:
            print("❌ Ошибка: для find требуется метка кассеты")
            return False
        return system.find(args[0])

    if command == 'check':
        return system.check()

    return system.version()


def main(argv: Optional[List[str]] = None) -> int:
    """Точка входа"""
    parser = argparse.ArgumentParser(
        prog='mtx-library',
        description="Управление ленточной библиотекой через mtx",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  %(prog)s status
  %(prog)s --mock load 1 0
  %(prog)s unload 0          # вернуть кассету в домашний слот
  %(prog)s unload 0 5
  %(prog)s transfer 3 33
  %(prog)s find S00001L6
  %(prog)s check
        """
    )

    parser.add_argument('command', choices=COMMANDS, help='Команда для выполнения')
    parser.add_argument('args', nargs='*', help='Аргументы команды')
    parser.add_argument('--config', help='Путь к файлу конфигурации YAML/JSON')
    parser.add_argument('--device', help='Устройство смены лент (например /dev/sg3)')
    parser.add_argument('--mock', action='store_true', default=None,
                        help='Использовать имитатор вместо устройства')

    args = parser.parse_args(argv)

    try:
        config = get_config_instance(args.config)
        setup_logging(config.logging)
        system = LibraryControl(config, use_mock=args.mock, device=args.device)
    except TapeLibraryError as e:
        print(f"❌ Ошибка инициализации: {e}")
        return 1

    try:
        success = run_command(system, args.command, args.args)
        return 0 if success else 1
    except KeyboardInterrupt:
        print("\n⚠️  Операция прервана пользователем")
        return 130
    except TapeLibraryError as e:
        print(f"❌ Ошибка: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
