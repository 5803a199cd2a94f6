"""
mtx_library - управление ленточной библиотекой через программу mtx
"""

__version__ = "1.0.0"

from .core.changer import Changer, CommandExecutor
from .core.exceptions import (
    TapeLibraryError,
    ExecutionError,
    FormatError,
    ArgumentError,
    TransferError,
    ConfigError,
)
from .core.models import SlotType, Volume, Slot, Inventory
from .core.status_parser import parse_status, render_status
from .hardware.mock_library import MockLibrary
from .hardware.mtx_executor import MtxExecutor

__all__ = [
    "Changer",
    "CommandExecutor",
    "TapeLibraryError",
    "ExecutionError",
    "FormatError",
    "ArgumentError",
    "TransferError",
    "ConfigError",
    "SlotType",
    "Volume",
    "Slot",
    "Inventory",
    "parse_status",
    "render_status",
    "MockLibrary",
    "MtxExecutor",
]
