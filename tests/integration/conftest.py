"""Fixtures for command-level tests: a throwaway copy of testing_grounds."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent.parent
TESTING_GROUNDS = REPO_ROOT / "testing_grounds"


@pytest.fixture
def fixture_project(tmp_path: Path) -> Path:
    if not TESTING_GROUNDS.is_dir():
        pytest.skip("testing_grounds not found")
    dest = tmp_path / "project"
    shutil.copytree(TESTING_GROUNDS, dest)
    return dest


@pytest.fixture(autouse=True)
def reset_iconkit_logger():
    """cli.main attaches handlers to the iconkit logger; drop them between tests."""
    yield
    logger = logging.getLogger("iconkit")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
