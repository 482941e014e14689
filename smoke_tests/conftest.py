"""Fixtures locating the package sources for smoke tests."""

from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE_DIR = PROJECT_ROOT / "src" / "subscription_messaging"


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def package_dir() -> Path:
    return PACKAGE_DIR
