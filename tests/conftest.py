"""Test configuration for local imports without installing the package."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure():
    """Ensure the src/ directory is importable for tests."""
    root = Path(__file__).resolve().parents[1] / "src"
    sys.path.insert(0, str(root))


CHAIN = ["0000", "0001", "0011", "0111"]

# A triangle 0-1-2 joined before the pair 3-4 reaches it.
TRIANGLE = ["00000", "00011", "00101", "11110", "11111"]


@pytest.fixture
def chain_lines():
    return list(CHAIN)


@pytest.fixture
def triangle_lines():
    return list(TRIANGLE)


@pytest.fixture
def write_lines(tmp_path):
    def _write(lines, name="genes.data"):
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines))
        return path

    return _write
