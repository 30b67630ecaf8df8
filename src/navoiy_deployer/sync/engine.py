"""Repository synchronizer.

This module provides the RepositorySynchronizer class which handles:
- Ensuring the target repository exists (create, or reuse on name conflict)
- Uploading a local directory tree, one create-or-update call per file
- Patching a README in another repository by anchor-based insertion

Every remote call is issued only after the previous one completes. Nothing
is retried.
"""

from __future__ import annotations

import hashlib
import logging
import re
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from ..github.client import GitHubClientError, GitHubConflictError, GitHubNotFoundError
from ..models import (
    FileEntry,
    FileUploadResult,
    ReadmePatchResult,
    ReadmePatchStatus,
    RepositoryHandle,
    UploadResult,
    UploadStatus,
)
from .file_walker import iter_file_paths, read_entry, relative_path

if TYPE_CHECKING:
    from ..github.client import GitHubClient
    from ..models import GitHubConfig

logger = logging.getLogger(__name__)

ResultCallback = Callable[[FileUploadResult], None]


def insert_after_anchor(text: str, anchor: str, section: str) -> tuple[str, bool]:
    """Insert section right after the first match of the anchor regex.

    Returns:
        (new_text, matched). When the anchor is absent the text is returned as-is.
    """
    match = re.search(anchor, text)
    if match is None:
        return text, False
    end = match.end()
    return f"{text[:end]}\n{section}\n{text[end:]}", True


def git_blob_sha(content: bytes) -> str:
    """Git object id of a blob with this content, as reported by the contents API."""
    return hashlib.sha1(b"blob %d\0" % len(content) + content).hexdigest()


def section_heading(section: str) -> str:
    """First non-blank line of a section, used to detect a previous insertion."""
    for line in section.splitlines():
        if line.strip():
            return line.strip()
    return ""


class RepositorySynchronizer:
    """Pushes a local directory tree and README changes to GitHub."""

    def __init__(self, github_client: GitHubClient) -> None:
        """Initialize the synchronizer.

        Args:
            github_client: Authenticated GitHub client
        """
        self._client = github_client

    # --- Repository ---

    def ensure_repository(
        self,
        config: GitHubConfig,
        homepage: str | None = None,
    ) -> RepositoryHandle:
        """Create the configured repository, or reuse it if the name is taken.

        Raises:
            GitHubClientError: Any failure other than a name conflict
        """
        org = config.owner if config.owner_type == "org" else None
        options: dict[str, object] = {
            "has_issues": True,
            "has_projects": False,
            "has_wiki": False,
            "auto_init": False,
        }
        if config.license_template:
            options["license_template"] = config.license_template

        try:
            data = self._client.create_repository(
                name=config.repo_name,
                description=config.description,
                homepage=homepage,
                private=config.private,
                org=org,
                **options,
            )
        except GitHubConflictError as e:
            if e.status_code != 422:
                raise
            logger.info("Repository %s already exists, reusing it", config.full_name)
            data = self._client.get_repository(config.owner, config.repo_name)
            return RepositoryHandle.from_api(data, created=False)

        handle = RepositoryHandle.from_api(data, created=True)
        logger.info("Created repository %s", handle.full_name)
        return handle

    # --- Upload ---

    def upload_tree(
        self,
        root: Path,
        repository: RepositoryHandle,
        branch: str | None = None,
        on_result: ResultCallback | None = None,
    ) -> UploadResult:
        """Upload every file under root, one remote write per file.

        Files are processed in lexicographic order of their relative path.
        A failing file is recorded and skipped; the walk continues.

        Args:
            root: Local directory to upload
            repository: Target repository
            branch: Target branch (default: the repository's default branch)
            on_result: Called with each file's result as soon as it is known

        Returns:
            UploadResult with one entry per file
        """
        result = UploadResult()
        branch = branch or repository.default_branch
        paths = iter_file_paths(root)
        logger.info("Uploading %d file(s) from %s to %s", len(paths), root, repository.full_name)

        for path in paths:
            rel = relative_path(root, path)
            try:
                entry = read_entry(root, path)
                status = self._upload_file(repository, entry, branch)
                file_result = FileUploadResult(path=rel, status=status)
                logger.debug("Uploaded %s (%s)", rel, status.value)
            except (GitHubClientError, OSError) as e:
                file_result = FileUploadResult(path=rel, status=UploadStatus.FAILED, error=str(e))
                logger.error("Failed to upload '%s': %s", rel, e)

            result.files.append(file_result)
            if on_result is not None:
                on_result(file_result)

        logger.info(
            "Upload finished: %d created, %d updated, %d unchanged, %d failed",
            result.created,
            result.updated,
            result.unchanged,
            len(result.failed),
        )
        return result

    def _upload_file(
        self,
        repository: RepositoryHandle,
        entry: FileEntry,
        branch: str,
    ) -> UploadStatus:
        """Create or update one file, skipping the write if content is identical."""
        existing = self._client.get_file(repository.owner, repository.name, entry.path, ref=branch)
        # Compare object ids; content is not inlined for files over 1MB
        if existing is not None and existing.sha == git_blob_sha(entry.content):
            return UploadStatus.UNCHANGED

        verb = "Add" if existing is None else "Update"
        self._client.put_file(
            repository.owner,
            repository.name,
            entry.path,
            entry.content,
            message=f"{verb} {entry.path}",
            branch=branch,
            sha=existing.sha if existing is not None else None,
        )
        return UploadStatus.CREATED if existing is None else UploadStatus.UPDATED

    # --- README ---

    def patch_readme(
        self,
        owner: str,
        repo: str,
        section: str,
        anchor: str,
        path: str = "README.md",
        branch: str = "main",
        message: str = "Update README",
    ) -> ReadmePatchResult:
        """Insert a section into a remote README after the anchor.

        The write carries the sha read just before, so a concurrent change
        makes it fail instead of being overwritten.

        Raises:
            GitHubNotFoundError: If the README does not exist
            GitHubClientError: Fetch or write failed (including a stale sha)
        """
        readme = self._client.get_file(owner, repo, path, ref=branch)
        if readme is None:
            raise GitHubNotFoundError(f"{path} not found in {owner}/{repo}")

        current = readme.text
        heading = section_heading(section)
        if heading and heading in current:
            logger.info("%s in %s/%s already contains '%s'", path, owner, repo, heading)
            return ReadmePatchResult(status=ReadmePatchStatus.ALREADY_PRESENT)

        updated, matched = insert_after_anchor(current, anchor, section)
        if not matched:
            logger.warning(
                "Anchor %r not found in %s/%s %s, leaving it unchanged", anchor, owner, repo, path
            )
            return ReadmePatchResult(status=ReadmePatchStatus.ANCHOR_MISSING)

        response = self._client.put_file(
            owner,
            repo,
            path,
            updated.encode("utf-8"),
            message=message,
            branch=branch,
            sha=readme.sha,
        )
        commit_sha = (response.get("commit") or {}).get("sha")
        logger.info("Patched %s in %s/%s (commit %s)", path, owner, repo, commit_sha)
        return ReadmePatchResult(status=ReadmePatchStatus.PATCHED, commit_sha=commit_sha)
