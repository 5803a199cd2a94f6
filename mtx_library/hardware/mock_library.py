#!/usr/bin/env python3
"""
In-memory tape library that answers mtx commands

Used in place of a real changer during testing and development. Each
instance owns its own slot and drive state.
"""

import logging
import re
from typing import List, Optional, Tuple

from ..core.exceptions import ArgumentError, TransferError
from ..core.models import Slot, SlotType, Volume
from ..core.status_parser import render_status

logger = logging.getLogger(__name__)

CLEANING_SERIAL = "CLN000L1"
SERIAL_FORMAT = "S{:05d}L6"

# unload to slot 0 sends the volume back to its home slot
HOME_SLOT = 0

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class MockLibrary:
    """
    Mock library auto changer

    Seeds the first num_volumes slots with volumes S00000L6, S00001L6, ...,
    puts a cleaning cartridge CLN000L1 in the last storage slot and one
    extra volume in the last import/export slot.
    """

    def __init__(self, num_drives: int, num_storage_slots: int,
                 num_mail_slots: int, num_volumes: int,
                 changer_id: str = "/dev/mock"):
        self.changer_id = changer_id
        self.num_drives = num_drives
        self.num_storage_slots = num_storage_slots
        self.num_mail_slots = num_mail_slots

        total = num_storage_slots + num_mail_slots

        # Volumes are addressed by position; moving one reassigns the entry
        # and clears the source so a volume is only ever held once.
        self._drives: List[Optional[Volume]] = [None] * num_drives
        self._slots: List[Optional[Volume]] = [None] * total
        self._slot_types: List[SlotType] = [
            SlotType.STORAGE if i < num_storage_slots else SlotType.MAIL
            for i in range(total)
        ]

        for i in range(total):
            if i < num_volumes:
                self._slots[i] = Volume(SERIAL_FORMAT.format(i), i + 1)

            if i == num_storage_slots - 1:
                self._slots[i] = Volume(CLEANING_SERIAL, i + 1)

            # home is the mail slot itself, like every other seeded volume
            if i == total - 1 and num_mail_slots > 0:
                self._slots[i] = Volume(SERIAL_FORMAT.format(num_volumes), i + 1)

        logger.info(
            f"Mock library {changer_id}: {num_drives} drives, "
            f"{num_storage_slots} storage slots, {num_mail_slots} mail slots"
        )

    def _slot_index(self, slot_num: int) -> int:
        if not 1 <= slot_num <= len(self._slots):
            raise ArgumentError(f"slot {slot_num} out of range 1..{len(self._slots)}")
        return slot_num - 1

    def _drive_index(self, drive_num: int) -> int:
        if not 0 <= drive_num < len(self._drives):
            raise ArgumentError(f"drive {drive_num} out of range 0..{len(self._drives) - 1}")
        return drive_num

    def load(self, slot_num: int, drive_num: int) -> None:
        """Move the volume in slot into the drive. Occupancy is not checked."""
        src = self._slot_index(slot_num)
        dst = self._drive_index(drive_num)

        self._drives[dst], self._slots[src] = self._slots[src], None

    def unload(self, slot_num: int, drive_num: int) -> None:
        """Move the volume in drive into slot, or into its home slot if slot is 0"""
        src = self._drive_index(drive_num)

        if slot_num == HOME_SLOT:
            volume = self._drives[src]
            if volume is None:
                raise ArgumentError(f"drive {drive_num} is empty, no home slot to unload to")
            slot_num = volume.home

        dst = self._slot_index(slot_num)

        self._slots[dst], self._drives[src] = self._drives[src], None

    def transfer(self, from_slot_num: int, to_slot_num: int) -> None:
        src = self._slot_index(from_slot_num)
        dst = self._slot_index(to_slot_num)

        if self._slots[src] is None:
            raise TransferError(from_slot_num, to_slot_num, "no volume to transfer")

        if self._slots[dst] is not None:
            raise TransferError(from_slot_num, to_slot_num, "destination occupied")

        self._slots[dst], self._slots[src] = self._slots[src], None

    def snapshot(self) -> Tuple[List[Slot], List[Slot]]:
        """Copies of the current drives and slots as Slot objects"""
        drives = [
            Slot(num=i, type=SlotType.DATA_TRANSFER, volume=volume)
            for i, volume in enumerate(self._drives)
        ]
        slots = [
            Slot(num=i + 1, type=slot_type, volume=volume)
            for i, (slot_type, volume) in enumerate(zip(self._slot_types, self._slots))
        ]
        return drives, slots

    def status(self) -> bytes:
        drives, slots = self.snapshot()
        text = render_status(self.changer_id, drives, slots, self.num_mail_slots)
        return text.encode("utf-8")

    def do(self, *args: str) -> bytes:
        """Simulate running the given mtx command"""
        if not args:
            raise ArgumentError("no command given")

        command, params = args[0], args[1:]
        logger.debug(f"mock mtx {' '.join(args)}")

        if command == "status":
            if params:
                raise ArgumentError("status takes no arguments")
            return self.status()

        operations = {
            "load": self.load,
            "unload": self.unload,
            "transfer": self.transfer,
        }

        if command not in operations:
            raise ArgumentError(f"unknown or unsupported mtx command: {command}")

        if len(params) != 2:
            raise ArgumentError(
                f"{command} takes exactly 2 arguments, got {len(params)}"
            )

        if not all(INTEGER_PATTERN.fullmatch(param) for param in params):
            raise ArgumentError(f"{command}: arguments must be integers, got {list(params)}")

        first, second = int(params[0]), int(params[1])

        operations[command](first, second)
        return b""
