"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def repo_lessons_dir() -> Path:
    """The real lessons shipped with the repository."""
    return REPO_ROOT / "src"


@pytest.fixture
def write_lesson(tmp_path: Path) -> Callable[..., Path]:
    """Write a lesson file under tmp_path/src/<section>/<name>."""

    def _write(text: str, name: str = "1_example.py", section: str = "lesson_1") -> Path:
        path = tmp_path / "src" / section / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
