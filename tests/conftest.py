from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Keep a developer's real key, .env or config out of the tests.
    for key in (
        "AI_API_KEYS",
        "GEMINI_CHAT_CFG",
        "GEMINI_BASE_URL",
        "GEMINI_MODEL_ID",
        "GEMINI_TIMEOUT_S",
        "GEMINI_CHAT_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
