from pathlib import Path

import pytest

from battmon.config.config import Config

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def ioreg_dump() -> str:
    return (DATA_DIR / "ioreg_battery.txt").read_text()


@pytest.fixture
def config() -> Config:
    return Config()
