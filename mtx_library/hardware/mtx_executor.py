#!/usr/bin/env python3
"""
Executor that runs the real mtx program against a SCSI changer device
"""

import subprocess
import logging
import time
from typing import List

from ..core.exceptions import ArgumentError, ExecutionError
from ..utils.library_logger import log_command

logger = logging.getLogger(__name__)


class MtxExecutor:
    """Runs `mtx -f <device> <command> ...` and returns its stdout"""

    def __init__(self, device: str = "/dev/sg3", mtx_path: str = "mtx",
                 timeout: int = 30):
        self.device = device
        self.mtx_path = mtx_path
        self.timeout = timeout

    def build_command(self, *args: str) -> List[str]:
        return [self.mtx_path, "-f", self.device, *args]

    def do(self, *args: str) -> bytes:
        """
        Execute an mtx command.

        Raises:
            ArgumentError: no command given
            ExecutionError: mtx missing, timed out, or exited non-zero
        """
        if not args:
            raise ArgumentError("no command given")

        cmd = self.build_command(*args)
        cmd_line = " ".join(cmd)
        logger.debug(f"Executing: {cmd_line}")

        start_time = time.monotonic()
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired:
            log_command(cmd_line, success=False, details="timeout")
            raise ExecutionError(
                cmd_line, reason=f"command '{cmd_line}' timed out after {self.timeout}s"
            )
        except OSError as e:
            log_command(cmd_line, success=False, details=str(e))
            raise ExecutionError(cmd_line, reason=f"unable to run '{cmd_line}': {e}")

        elapsed = time.monotonic() - start_time
        stderr = result.stderr.decode("utf-8", errors="replace")

        if result.returncode != 0:
            log_command(cmd_line, success=False, details=stderr.strip(),
                        execution_time=elapsed)
            raise ExecutionError(cmd_line, result.returncode, stderr)

        log_command(cmd_line, success=True, execution_time=elapsed)
        return result.stdout
