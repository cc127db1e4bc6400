import json
import subprocess
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent
FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def temp_project():
    """Create a temporary project directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_grid(temp_project):
    """Write text to a file in the temp directory and return its path."""

    def _write(name: str, content: str | bytes) -> Path:
        path = temp_project / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _write


def fixture_path(name: str) -> str:
    return str(FIXTURES / name)


def run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    """Run gridcheck CLI command via subprocess (for smoke tests only)."""
    cmd = [sys.executable, "-m", "gridcheck.cli", *args]
    return subprocess.run(cmd, capture_output=True, text=True, cwd=ROOT)


def run_cli_json(*args: str) -> dict:
    """Run gridcheck CLI and parse JSON output."""
    result = run_cli("-f", "json", *args)
    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    return json.loads(result.stdout)
