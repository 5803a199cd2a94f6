#!/usr/bin/env python3
"""
Changer: high-level operations on a tape library changer
"""

import logging
from typing import List, Optional, Protocol

from .exceptions import TapeLibraryError
from .models import Inventory, Slot
from .status_parser import parse_status

logger = logging.getLogger(__name__)


class CommandExecutor(Protocol):
    """
    Anything that can run an mtx command.

    `do("status")` returns the raw status report; load, unload and transfer
    take two decimal arguments and return an empty payload. Failures are
    raised as ExecutionError (the program failed) or ArgumentError (the
    invocation was malformed).
    """

    def do(self, *args: str) -> bytes:
        ...


class Changer:
    """Library changer driven through a CommandExecutor"""

    def __init__(self, executor: CommandExecutor):
        self.executor = executor

    def _move(self, command: str, first: int, second: int) -> None:
        try:
            self.executor.do(command, str(first), str(second))
        except TapeLibraryError as e:
            logger.error(f"mtx {command} {first} {second} failed: {e}")
            raise
        logger.info(f"mtx {command} {first} {second} completed")

    def load(self, slot_num: int, drive_num: int) -> None:
        """Load drive with the volume from slot"""
        self._move("load", slot_num, drive_num)

    def unload(self, slot_num: int, drive_num: int) -> None:
        """
        Unload the volume in a drive into a slot.

        Slot 0 asks the changer to return the volume to its home slot.
        """
        self._move("unload", slot_num, drive_num)

    def transfer(self, from_slot_num: int, to_slot_num: int) -> None:
        """Move a volume from one storage/mail slot to another"""
        self._move("transfer", from_slot_num, to_slot_num)

    def status(self) -> Inventory:
        """Query the changer and parse a fresh snapshot"""
        return parse_status(self.executor.do("status"))

    def max_drives(self) -> int:
        """
        Number of data transfer elements. This does not necessarily match
        the number of drives physically installed.
        """
        return self.status().max_drives

    def num_slots(self) -> int:
        """Number of storage and mail slots"""
        return self.status().num_slots

    def num_storage_slots(self) -> int:
        return self.status().num_storage_slots

    def num_mail_slots(self) -> int:
        return self.status().num_mail_slots

    def drives(self) -> List[Slot]:
        """Data transfer elements, usually numbered from 0"""
        return self.status().drives

    def slots(self) -> List[Slot]:
        """Storage slots followed by mail slots, usually numbered from 1"""
        return self.status().slots

    def storage_slots(self) -> List[Slot]:
        return self.status().storage_slots

    def mail_slots(self) -> List[Slot]:
        """Mail slots, numbered on from the last storage slot"""
        return self.status().mail_slots

    def find_volume(self, serial: str) -> Optional[Slot]:
        """Slot or drive currently holding the volume, None if absent"""
        return self.status().find_volume(serial)

    def empty_slots(self) -> List[Slot]:
        return [slot for slot in self.slots() if slot.is_empty]

    def loaded_drives(self) -> List[Slot]:
        return [drive for drive in self.drives() if not drive.is_empty]
