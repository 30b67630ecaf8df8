"""Local directory enumeration for uploads."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..models import FileEntry


def iter_file_paths(root: Path) -> list[Path]:
    """List every regular file under root, sorted by relative path.

    Raises:
        FileNotFoundError: If root does not exist
        NotADirectoryError: If root is not a directory
    """
    if not root.exists():
        raise FileNotFoundError(f"Directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    files = [p for p in root.rglob("*") if p.is_file()]
    return sorted(files, key=lambda p: relative_path(root, p))


def relative_path(root: Path, path: Path) -> str:
    """Path of a file relative to root, with '/' separators."""
    return path.relative_to(root).as_posix()


def read_entry(root: Path, path: Path) -> FileEntry:
    """Read a file into a FileEntry."""
    return FileEntry(path=relative_path(root, path), content=path.read_bytes())


def collect_files(root: Path) -> Iterator[FileEntry]:
    """Yield FileEntry values for every file under root, in sorted order.

    Content is read lazily, one file at a time.
    """
    for path in iter_file_paths(root):
        yield read_entry(root, path)
