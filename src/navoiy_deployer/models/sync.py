"""Data models for repository synchronization."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class UploadStatus(str, Enum):
    """Outcome of a single file upload."""

    CREATED = "created"  # File was absent remotely
    UPDATED = "updated"  # Remote content differed and was replaced
    UNCHANGED = "unchanged"  # Remote content already identical, no write
    FAILED = "failed"  # Read or remote write failed


class ReadmePatchStatus(str, Enum):
    """Outcome of the central README patch."""

    PATCHED = "patched"
    ALREADY_PRESENT = "already_present"  # Section heading already in README
    ANCHOR_MISSING = "anchor_missing"  # Anchor not found, nothing written


@dataclass(frozen=True)
class RepositoryHandle:
    """A remote repository identified by owner and name."""

    owner: str
    name: str
    default_branch: str = "main"
    html_url: str = ""
    created: bool = False  # True if this run created it

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @classmethod
    def from_api(cls, data: dict[str, Any], created: bool = False) -> RepositoryHandle:
        """Build a handle from a GitHub repository payload."""
        return cls(
            owner=data["owner"]["login"],
            name=data["name"],
            default_branch=data.get("default_branch") or "main",
            html_url=data.get("html_url", ""),
            created=created,
        )


@dataclass(frozen=True)
class FileEntry:
    """A local file to upload: path relative to the root, and its bytes."""

    path: str  # Always "/"-separated
    content: bytes


@dataclass(frozen=True)
class RemoteFile:
    """A file as stored in a remote repository."""

    path: str
    content: bytes
    sha: str  # Concurrency token required to update the file

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")


@dataclass
class FileUploadResult:
    """Result of uploading one file."""

    path: str
    status: UploadStatus
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is not UploadStatus.FAILED


@dataclass
class UploadResult:
    """Result of uploading a directory tree."""

    files: list[FileUploadResult] = field(default_factory=list)

    def _count(self, status: UploadStatus) -> int:
        return sum(1 for f in self.files if f.status is status)

    @property
    def created(self) -> int:
        return self._count(UploadStatus.CREATED)

    @property
    def updated(self) -> int:
        return self._count(UploadStatus.UPDATED)

    @property
    def unchanged(self) -> int:
        return self._count(UploadStatus.UNCHANGED)

    @property
    def failed(self) -> list[FileUploadResult]:
        """Results for files that could not be uploaded."""
        return [f for f in self.files if f.status is UploadStatus.FAILED]

    @property
    def has_errors(self) -> bool:
        """Whether any file failed."""
        return len(self.failed) > 0


@dataclass
class ReadmePatchResult:
    """Result of patching the central README."""

    status: ReadmePatchStatus
    commit_sha: str | None = None

    @property
    def changed(self) -> bool:
        return self.status is ReadmePatchStatus.PATCHED
