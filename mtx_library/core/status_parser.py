#!/usr/bin/env python3
"""
Parser for the text report printed by `mtx status`.

The report layout is dictated by the mtx program, so the parser is a strict
recognizer: any line it cannot classify is a FormatError, never a skip.

    Storage Changer /dev/sg3:1 Drives, 24 Slots ( 1 Import/Export )
  Data Transfer Element 0:Full (Storage Element 3 Loaded):VolumeTag = S00002L6
        Storage Element 1:Full :VolumeTag=S00000L6
        Storage Element 24 IMPORT/EXPORT:Empty
"""

import re
import logging
from typing import List, Union

from .exceptions import FormatError
from .models import Inventory, Slot, SlotType, Volume

logger = logging.getLogger(__name__)

EMPTY = "Empty"
MAIL_TAG = "IMPORT/EXPORT"

HEADER_PATTERN = re.compile(
    r"^\s*Storage Changer\s*(.*):([0-9]+) Drives, ([0-9]+) Slots \(\s*([0-9]+) Import/Export\s*\)\s*$"
)
DRIVE_PATTERN = re.compile(r"^\s*Data Transfer Element ([0-9]+):(.*)$")
DRIVE_FULL_PATTERN = re.compile(
    r"^Full \(Storage Element ([0-9]+) Loaded\):VolumeTag = (\S.*?)\s*$"
)
SLOT_PATTERN = re.compile(r"^\s*Storage Element ([0-9]+):(.*)$")
MAIL_SLOT_PATTERN = re.compile(r"^\s*Storage Element ([0-9]+) IMPORT/EXPORT:(.*)$")
SLOT_FULL_PATTERN = re.compile(r"^Full :VolumeTag=(\S.*?)\s*$")


def _is_empty(state: str) -> bool:
    return state.rstrip() == EMPTY


def _parse_drive(num: int, state: str, line_number: int, line: str) -> Slot:
    slot = Slot(num=num, type=SlotType.DATA_TRANSFER)
    if not _is_empty(state):
        match = DRIVE_FULL_PATTERN.match(state)
        if match is None:
            raise FormatError("failed to parse transfer element", line_number, line)
        slot.volume = Volume(serial=match.group(2), home=int(match.group(1)))
    return slot


def _parse_slot(num: int, slot_type: SlotType, state: str,
                line_number: int, line: str) -> Slot:
    slot = Slot(num=num, type=slot_type)
    if not _is_empty(state):
        match = SLOT_FULL_PATTERN.match(state)
        if match is None:
            raise FormatError("failed to parse slot element", line_number, line)
        slot.volume = Volume(serial=match.group(1), home=num)
    return slot


def parse_status(raw: Union[str, bytes]) -> Inventory:
    """
    Разбор вывода mtx status в Inventory

    Args:
        raw: Вывод команды (bytes или str)

    Returns:
        Inventory со списками приводов и слотов в порядке строк отчета

    Raises:
        FormatError: заголовок отсутствует или строка не распознана
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(f"status output is not valid UTF-8: {e}")

    lines = raw.splitlines()
    if not lines:
        raise FormatError("failed to match mtx status header: empty status output", 1, "")

    header = HEADER_PATTERN.match(lines[0])
    if header is None:
        raise FormatError("failed to match mtx status header", 1, lines[0])

    inventory = Inventory(
        changer_id=header.group(1).strip(),
        max_drives=int(header.group(2)),
        num_slots=int(header.group(3)),
        num_mail_slots=int(header.group(4)),
    )

    storage: List[Slot] = []
    mail: List[Slot] = []

    for line_number, line in enumerate(lines[1:], start=2):
        match = DRIVE_PATTERN.match(line)
        if match:
            inventory.drives.append(
                _parse_drive(int(match.group(1)), match.group(2), line_number, line)
            )
            continue

        match = SLOT_PATTERN.match(line)
        if match:
            storage.append(
                _parse_slot(int(match.group(1)), SlotType.STORAGE,
                            match.group(2), line_number, line)
            )
            continue

        match = MAIL_SLOT_PATTERN.match(line)
        if match:
            mail.append(
                _parse_slot(int(match.group(1)), SlotType.MAIL,
                            match.group(2), line_number, line)
            )
            continue

        raise FormatError("failed to parse slot", line_number, line)

    inventory.slots = storage + mail

    logger.debug(
        f"Parsed status of {inventory.changer_id}: {len(inventory.drives)} drives, "
        f"{len(storage)} storage slots, {len(mail)} mail slots"
    )
    return inventory


def format_slot_state(slot: Slot) -> str:
    """State part of a status line: Empty or the Full encoding for the slot type."""
    if slot.volume is None:
        return EMPTY

    if slot.type == SlotType.DATA_TRANSFER:
        return (f"Full (Storage Element {slot.volume.home} Loaded)"
                f":VolumeTag = {slot.volume.serial}")

    return f"Full :VolumeTag={slot.volume.serial}"


def render_status(changer_id: str, drives: List[Slot], slots: List[Slot],
                  num_mail_slots: int) -> str:
    """
    Сформировать текст в формате mtx status

    Порядок строк: заголовок, приводы, затем слоты хранения и почтовые слоты.
    Результат разбирается parse_status без потерь.
    """
    lines = [
        f"  Storage Changer {changer_id}:{len(drives)} Drives, "
        f"{len(slots)} Slots ( {num_mail_slots} Import/Export )"
    ]

    for drive in drives:
        lines.append(f"Data Transfer Element {drive.num}:{format_slot_state(drive)}")

    for slot in slots:
        tag = f" {MAIL_TAG}" if slot.type == SlotType.MAIL else ""
        lines.append(f"      Storage Element {slot.num}{tag}:{format_slot_state(slot)}")

    return "\n".join(lines) + "\n"
