from datetime import datetime
from pathlib import Path
import sys

import pytest

# Allow running tests without installing the package in editable mode.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from delog.core.logger import Logger  # noqa: E402

FIXED_NOW = datetime(2026, 3, 7, 9, 5, 2)
FIXED_STAMP = "03-07 09:05:02"


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return tmp_path / "test.log"


@pytest.fixture
def logger(log_path: Path):
    log = Logger(log_path, clock=lambda: FIXED_NOW)
    yield log
    log.close()
