"""Smoke tests running mypy over subscription_messaging."""

import subprocess
import sys
from pathlib import Path

import pytest

pytestmark = pytest.mark.smoke

MAX_REPORTED_ERRORS = 20


def _mypy(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "mypy", *args],
        capture_output=True,
        text=True,
        cwd=cwd,
    )


@pytest.fixture(scope="module")
def mypy_available() -> bool:
    try:
        return _mypy("--version").returncode == 0
    except OSError:
        return False


def test_package_type_checks(project_root: Path, package_dir: Path, mypy_available: bool) -> None:
    """mypy reports no errors for the package sources."""
    if not mypy_available:
        pytest.fail("mypy not available. Install with: pip install -e '.[test]'")

    result = _mypy(
        str(package_dir), "--ignore-missing-imports", "--no-error-summary", cwd=project_root
    )

    if result.returncode != 0:
        lines = result.stdout.strip().splitlines()
        report = "\n".join(f"  {line}" for line in lines[:MAX_REPORTED_ERRORS])
        if len(lines) > MAX_REPORTED_ERRORS:
            report += f"\n  ... and {len(lines) - MAX_REPORTED_ERRORS} more errors"
        pytest.fail(f"Type checking failed in subscription_messaging:\n{report}\n{result.stderr}")


def test_builder_contract_type_checks(package_dir: Path, mypy_available: bool) -> None:
    """The chainable contract parses on its own."""
    if not mypy_available:
        pytest.skip("mypy not available")

    contract = package_dir / "contracts" / "subscription_configuration_interface.py"
    result = _mypy(str(contract), "--ignore-missing-imports")

    assert result.returncode in (0, 1), f"mypy crashed unexpectedly: {result.stderr}"
