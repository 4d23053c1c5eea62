from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from loguru import logger

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.pop("CLICKOVERLAY_CONFIG", None)


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger.remove()
