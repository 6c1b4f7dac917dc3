"""Pytest configuration and shared fixtures for arraydiff tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from arraydiff.engine import NamedSequence


@pytest.fixture
def seq_a() -> NamedSequence:
    """Return a list with a duplicated shared value."""
    return NamedSequence("A", [1, 1, 2])


@pytest.fixture
def seq_b() -> NamedSequence:
    """Return a list sharing one value with seq_a."""
    return NamedSequence("B", [1, 3])


@pytest.fixture
def seq_c() -> NamedSequence:
    """Return a list of mixed kinds."""
    return NamedSequence("C", [2, "2", True, "x"])


@pytest.fixture
def write_list_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes list text to a file under tmp_path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
