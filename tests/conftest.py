from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tests._fakes import FakeTimeularApi  # noqa: E402


@pytest.fixture()
def catalog_payload() -> list[dict[str, Any]]:
    return [
        {"id": "1", "name": "Coding", "color": "#a1b2c3", "integration": "zei"},
        {"id": "2", "name": "Meeting", "color": "#ffffff", "integration": "zei"},
    ]


@pytest.fixture()
def fake_api(catalog_payload: list[dict[str, Any]]) -> FakeTimeularApi:
    return FakeTimeularApi(catalog_payload)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    httpx_logger = logging.getLogger("httpx")
    handlers, level, httpx_level = list(root.handlers), root.level, httpx_logger.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    httpx_logger.setLevel(httpx_level)
