"""
Pytest configuration for the college counseling allocator.

Provides fixtures for:
- Temporary datasets and indirection files
- Isolated instance counters
- Settings cache reset between tests
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Generator

import pytest

from counseling.config import get_settings
from counseling.strategies.rank_interval import InstanceCounter

SAMPLE_DATASET = "100-200:Tech U\n201-300:State College\n"


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """
    Drop cached Settings so env overrides in one test never leak into another.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def counter() -> InstanceCounter:
    """A fresh counter, independent of the process-wide one."""
    return InstanceCounter()


@pytest.fixture
def write_dataset(tmp_path: Path) -> Callable[..., Path]:
    """
    Factory writing dataset text to a file under tmp_path.
    """

    def _write(content: str, name: str = "colleges.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_dataset(write_dataset: Callable[..., Path]) -> Path:
    return write_dataset(SAMPLE_DATASET)


@pytest.fixture
def workspace(tmp_path: Path, sample_dataset: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    A working directory holding `data.txt` that points at the sample dataset.
    """
    (tmp_path / "data.txt").write_text(f"{sample_dataset}\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path
