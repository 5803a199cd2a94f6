"""
Shared fixtures for mtx_library tests.
"""

import pytest

from mtx_library.core.changer import Changer
from mtx_library.core.config_manager import LoggingConfig
from mtx_library.hardware.mock_library import MockLibrary
from mtx_library.utils.library_logger import setup_logging


SAMPLE_STATUS = (
    "  Storage Changer /dev/sg3:2 Drives, 5 Slots ( 1 Import/Export )\n"
    "Data Transfer Element 0:Full (Storage Element 3 Loaded):VolumeTag = ABC003L6          \n"
    "Data Transfer Element 1:Empty\n"
    "      Storage Element 1:Full :VolumeTag=ABC001L6\n"
    "      Storage Element 2:Empty\n"
    "      Storage Element 3:Empty\n"
    "      Storage Element 4:Full :VolumeTag=CLN000L1\n"
    "      Storage Element 5 IMPORT/EXPORT:Full :VolumeTag=ABC005L6\n"
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to this test's captured streams."""
    yield
    setup_logging(LoggingConfig(console_enabled=False))


@pytest.fixture
def sample_status():
    """A status report in the layout printed by mtx."""
    return SAMPLE_STATUS


@pytest.fixture
def library():
    """8 drives, 32 storage slots, 4 mail slots, 16 seeded volumes."""
    return MockLibrary(8, 32, 4, 16)


@pytest.fixture
def changer(library):
    return Changer(library)
