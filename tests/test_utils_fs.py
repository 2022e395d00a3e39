"""Tests for directory helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from utils.fs import ensure_exists, remove_dir


def test_ensure_exists_creates_nested(tmp_path: Path):
    """Every missing parent directory is created."""
    target = tmp_path / "a" / "b" / "c"
    result = ensure_exists(target)
    assert result == target
    assert target.is_dir()


def test_ensure_exists_is_idempotent(tmp_path: Path):
    """Existing directories are accepted."""
    target = tmp_path / "again"
    ensure_exists(target)
    ensure_exists(str(target))
    assert target.is_dir()


def test_ensure_exists_normalizes(tmp_path: Path):
    """The returned path is normalized."""
    result = ensure_exists(f"{tmp_path}/x/../y")
    assert result == tmp_path / "y"
    assert result.is_dir()


def test_ensure_exists_rejects_file(tmp_path: Path):
    """A regular file in the way raises OSError."""
    blocker = tmp_path / "file"
    blocker.write_text("data", encoding="utf-8")
    with pytest.raises(OSError):
        ensure_exists(blocker / "child")
    with pytest.raises(OSError):
        ensure_exists(blocker)


def test_remove_dir(tmp_path: Path):
    """A whole directory tree is removed."""
    target = tmp_path / "tree"
    (target / "nested").mkdir(parents=True)
    (target / "nested" / "file.txt").write_text("x", encoding="utf-8")
    assert remove_dir(target) is True
    assert not target.exists()


def test_remove_dir_missing(tmp_path: Path):
    """Removing a missing directory reports False."""
    assert remove_dir(tmp_path / "missing") is False
