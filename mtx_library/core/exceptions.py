"""
Exceptions for mtx_library.

Exception Hierarchy:
    TapeLibraryError (base)
    ├── ExecutionError - the mtx program (or its stand-in) failed to run
    ├── FormatError    - status text does not match the mtx grammar
    ├── ArgumentError  - malformed command invocation
    ├── TransferError  - move precondition violated (empty source, occupied target)
    └── ConfigError    - configuration file missing or invalid

Nothing in the library retries: after a failed mechanical operation the
physical state is unknown and must be re-read with a status query.
"""

from typing import Optional, Dict, Any


class TapeLibraryError(Exception):
    """
    Base exception for all mtx_library errors.

    Args:
        message: Human-readable error message
        details: Optional dictionary with additional context for debugging
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ExecutionError(TapeLibraryError):
    """
    The changer control program could not be run or exited non-zero.

    Carries the command line, the exit status and whatever the program
    wrote to stderr.
    """

    def __init__(self, command: str, returncode: Optional[int] = None,
                 stderr: str = "", reason: str = ""):
        message = reason or f"command '{command}' failed with exit status {returncode}"
        if stderr:
            message = f"{message}: {stderr.strip()}"
        details = {"command": command, "returncode": returncode}
        super().__init__(message, details)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class FormatError(TapeLibraryError):
    """Status text does not match the expected grammar."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 line: Optional[str] = None):
        details = {}
        if line_number is not None:
            details["line_number"] = line_number
        if line is not None:
            details["line"] = line
        super().__init__(message, details)
        self.line_number = line_number
        self.line = line


class ArgumentError(TapeLibraryError):
    """Wrong number of arguments, unknown command or non-numeric slot."""


class TransferError(TapeLibraryError):
    """
    A volume move was refused because its preconditions do not hold.
    """

    def __init__(self, from_slot: int, to_slot: int, reason: str):
        message = f"unable to transfer volume from slot {from_slot} to slot {to_slot}: {reason}"
        super().__init__(message, {"from_slot": from_slot, "to_slot": to_slot})
        self.from_slot = from_slot
        self.to_slot = to_slot
        self.reason = reason


class ConfigError(TapeLibraryError):
    """Configuration file could not be loaded or failed validation."""
