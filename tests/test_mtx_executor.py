"""
Unit tests for the mtx subprocess executor.

subprocess.run is patched; no mtx binary or changer device is needed.
"""

import subprocess
from unittest.mock import patch

import pytest

from mtx_library.core.changer import Changer
from mtx_library.core.exceptions import ArgumentError, ExecutionError
from mtx_library.hardware.mtx_executor import MtxExecutor

RUN = "mtx_library.hardware.mtx_executor.subprocess.run"


def completed(cmd, returncode=0, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def executor():
    return MtxExecutor(device="/dev/sg3", mtx_path="/usr/sbin/mtx", timeout=10)


def test_builds_command_line(executor):
    with patch(RUN, return_value=completed([])) as run:
        executor.do("load", "1", "0")

    run.assert_called_once_with(
        ["/usr/sbin/mtx", "-f", "/dev/sg3", "load", "1", "0"],
        capture_output=True,
        timeout=10
    )


def test_returns_stdout(executor, sample_status):
    output = sample_status.encode("utf-8")
    with patch(RUN, return_value=completed([], stdout=output)):
        assert executor.do("status") == output


def test_non_zero_exit(executor):
    result = completed([], returncode=1, stderr=b"Drive 0 Full (Storage Element 1 Loaded)\n")
    with patch(RUN, return_value=result):
        with pytest.raises(ExecutionError) as excinfo:
            executor.do("load", "2", "0")

    error = excinfo.value
    assert error.returncode == 1
    assert "Storage Element 1 Loaded" in error.stderr
    assert error.command == "/usr/sbin/mtx -f /dev/sg3 load 2 0"


def test_missing_program(executor):
    with patch(RUN, side_effect=FileNotFoundError("No such file or directory: '/usr/sbin/mtx'")):
        with pytest.raises(ExecutionError, match="unable to run"):
            executor.do("status")


def test_timeout(executor):
    with patch(RUN, side_effect=subprocess.TimeoutExpired(cmd="mtx", timeout=10)):
        with pytest.raises(ExecutionError, match="timed out"):
            executor.do("status")


def test_no_command(executor):
    with patch(RUN) as run:
        with pytest.raises(ArgumentError):
            executor.do()
    run.assert_not_called()


def test_changer_over_mtx(executor, sample_status):
    with patch(RUN, return_value=completed([], stdout=sample_status.encode("utf-8"))):
        changer = Changer(executor)
        assert changer.num_storage_slots() == 4
        assert changer.drives()[0].volume.serial == "ABC003L6"

