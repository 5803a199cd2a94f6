#!/usr/bin/env python3
"""
Модель состояния ленточной библиотеки: слоты, приводы и кассеты
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, List, Tuple


class SlotType(Enum):
    """Тип слота библиотеки"""
    DATA_TRANSFER = "DataTransferSlot"
    STORAGE = "StorageSlot"
    MAIL = "MailSlot"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Volume:
    """Кассета (том) с меткой serial и домашним слотом home"""
    serial: str
    home: int

    def __str__(self) -> str:
        return self.serial


@dataclass
class Slot:
    """
    Слот библиотеки

    Нумерация: приводы считаются с 0, слоты хранения и почтовые слоты с 1.
    Если в слоте есть кассета, volume не None.
    """
    num: int
    type: SlotType
    volume: Optional[Volume] = None

    @property
    def is_empty(self) -> bool:
        return self.volume is None

    def __str__(self) -> str:
        return f"{self.type}[{self.num}]: {self.volume}"


@dataclass
class Inventory:
    """Снимок состояния библиотеки, полученный из одного вывода mtx status"""
    changer_id: str
    max_drives: int
    num_slots: int
    num_mail_slots: int
    drives: List[Slot] = field(default_factory=list)
    slots: List[Slot] = field(default_factory=list)

    @property
    def num_storage_slots(self) -> int:
        return self.num_slots - self.num_mail_slots

    @property
    def storage_slots(self) -> List[Slot]:
        return [slot for slot in self.slots if slot.type == SlotType.STORAGE]

    @property
    def mail_slots(self) -> List[Slot]:
        return [slot for slot in self.slots if slot.type == SlotType.MAIL]

    def volumes(self) -> List[Tuple[Slot, Volume]]:
        """Все кассеты библиотеки вместе с местом, где они находятся"""
        return [
            (slot, slot.volume)
            for slot in self.drives + self.slots
            if slot.volume is not None
        ]

    def find_volume(self, serial: str) -> Optional[Slot]:
        for slot, volume in self.volumes():
            if volume.serial == serial:
                return slot
        return None
