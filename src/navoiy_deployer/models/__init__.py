"""Data models."""

from .deploy_config import (
    DeployConfig,
    GitHubConfig,
    NavoiyConfig,
    TerraColors,
    TerraConfig,
)
from .sync import (
    FileEntry,
    FileUploadResult,
    ReadmePatchResult,
    ReadmePatchStatus,
    RemoteFile,
    RepositoryHandle,
    UploadResult,
    UploadStatus,
)

__all__ = [
    "DeployConfig",
    "FileEntry",
    "FileUploadResult",
    "GitHubConfig",
    "NavoiyConfig",
    "ReadmePatchResult",
    "ReadmePatchStatus",
    "RemoteFile",
    "RepositoryHandle",
    "TerraColors",
    "TerraConfig",
    "UploadResult",
    "UploadStatus",
]
