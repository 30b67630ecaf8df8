"""GitHub REST API client."""

from __future__ import annotations

import base64
import logging
import os
import subprocess
import time
from typing import Any
from urllib.parse import quote

import httpx

from ..models import RemoteFile

logger = logging.getLogger(__name__)


class GitHubClientError(Exception):
    """Base exception for GitHub client errors."""

    pass


class GitHubAuthError(GitHubClientError):
    """Authentication failed."""

    pass


class GitHubNotFoundError(GitHubClientError):
    """Resource not found."""

    pass


class GitHubForbiddenError(GitHubClientError):
    """Permission denied."""

    pass


class GitHubRateLimitError(GitHubClientError):
    """Rate limit exceeded."""

    pass


class GitHubConflictError(GitHubClientError):
    """The request conflicts with remote state (name taken, stale sha)."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


def _api_root(base_url: str) -> str:
    """REST root for github.com or an Enterprise host."""
    if base_url == "api.github.com":
        return "https://api.github.com"
    return f"https://{base_url}/api/v3"


def _error_message(response: httpx.Response) -> str:
    """Extract the 'message' field of an error payload, falling back to raw text."""
    try:
        payload = response.json()
    except ValueError:
        return response.text
    if isinstance(payload, dict) and payload.get("message"):
        details = [e.get("message", "") for e in payload.get("errors", []) if isinstance(e, dict)]
        details = [d for d in details if d]
        if details:
            return f"{payload['message']}: {'; '.join(details)}"
        return payload["message"]
    return response.text


class GitHubClient:
    """GitHub REST API client.

    Provides a thin wrapper around the repository and contents endpoints with:
    - Token authentication (from env var or gh CLI)
    - Enterprise support via custom base_url
    - Error handling and rate limit awareness
    """

    def __init__(self, token: str, base_url: str = "api.github.com"):
        """Initialize the GitHub client.

        Args:
            token: GitHub personal access token
            base_url: API host (default: api.github.com, use custom for Enterprise)
        """
        self.token = token
        self.base_url = base_url
        self._api_url = _api_root(base_url)
        self._client = httpx.Client(
            base_url=self._api_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=30.0,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @classmethod
    def from_environment(cls, base_url: str = "api.github.com") -> GitHubClient:
        """Create a client from environment variables or gh CLI.

        Tries in order:
        1. GITHUB_TOKEN environment variable
        2. gh auth token (if gh CLI is installed and authenticated)

        Args:
            base_url: API host

        Returns:
            Configured GitHubClient

        Raises:
            GitHubAuthError: If no token is available
        """
        # Try GITHUB_TOKEN env var first
        token = os.environ.get("GITHUB_TOKEN")
        if token:
            logger.debug("Using token from GITHUB_TOKEN environment variable")
            return cls(token, base_url)

        # Try gh CLI
        try:
            result = subprocess.run(
                ["gh", "auth", "token"],
                capture_output=True,
                text=True,
                check=True,
            )
            token = result.stdout.strip()
            if token:
                logger.debug("Using token from gh CLI")
                return cls(token, base_url)
        except (subprocess.CalledProcessError, FileNotFoundError):
            logger.debug("gh CLI not available or not authenticated")

        logger.error("No GitHub token found")
        raise GitHubAuthError(
            "No GitHub token found. Either:\n"
            '  - Export a token with repo scope: export GITHUB_TOKEN="your_token_here"\n'
            "  - Run 'gh auth login' to authenticate with GitHub CLI"
        )

    def request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a REST request and return the decoded JSON body.

        Raises:
            GitHubAuthError: Authentication failed
            GitHubNotFoundError: Resource not found
            GitHubForbiddenError: Permission denied
            GitHubRateLimitError: Rate limit exceeded
            GitHubConflictError: 409/422 (name taken, stale sha, validation)
            GitHubClientError: Other errors
        """
        op_name = f"{method} {path}"
        # Log request details (DEBUG level for params to avoid sensitive data at INFO)
        logger.debug("REST %s: params=%s", op_name, params)

        start_time = time.monotonic()
        try:
            response = self._client.request(method, path, json=json, params=params)
        except httpx.RequestError as e:
            elapsed_ms = (time.monotonic() - start_time) * 1000
            logger.error("REST %s failed after %.0fms: %s", op_name, elapsed_ms, e)
            raise GitHubClientError(f"Request failed: {e}") from e

        elapsed_ms = (time.monotonic() - start_time) * 1000
        status = response.status_code

        # Handle HTTP errors
        if status == 401:
            logger.error("REST %s: 401 Unauthorized (%.0fms)", op_name, elapsed_ms)
            raise GitHubAuthError(
                "Authentication failed. Check your GITHUB_TOKEN.\nRequired scopes: repo"
            )
        if status == 403:
            # Check if rate limited
            if "rate limit" in response.text.lower():
                logger.error("REST %s: 403 Rate Limited (%.0fms)", op_name, elapsed_ms)
                raise GitHubRateLimitError("GitHub API rate limit exceeded. Try again later.")
            logger.error("REST %s: 403 Forbidden (%.0fms)", op_name, elapsed_ms)
            raise GitHubForbiddenError(
                "Permission denied. Check that your token has the 'repo' scope "
                f"and access to this repository ({path})"
            )
        if status == 404:
            logger.info("REST %s: 404 Not Found (%.0fms)", op_name, elapsed_ms)
            raise GitHubNotFoundError(f"Resource not found: {path}")
        if status in (409, 422):
            message = _error_message(response)
            logger.warning("REST %s: %d %s (%.0fms)", op_name, status, message, elapsed_ms)
            raise GitHubConflictError(message, status)
        if status >= 400:
            logger.error("REST %s: HTTP %d (%.0fms)", op_name, status, elapsed_ms)
            raise GitHubClientError(f"HTTP {status}: {_error_message(response)}")

        # Parse REST response
        try:
            result = response.json()
        except ValueError as e:
            logger.error("REST %s: Invalid JSON response (%.0fms)", op_name, elapsed_ms)
            raise GitHubClientError(f"Invalid JSON response: {e}") from e

        # Success
        logger.info("REST %s: %d (%.0fms)", op_name, status, elapsed_ms)
        return result

    # --- Repositories ---

    def create_repository(
        self,
        name: str,
        description: str = "",
        homepage: str | None = None,
        private: bool = False,
        org: str | None = None,
        **options: Any,
    ) -> dict[str, Any]:
        """Create a repository for the authenticated user, or in an organization.

        Extra keyword options (has_issues, license_template, ...) are sent as-is.
        """
        payload: dict[str, Any] = {
            "name": name,
            "description": description,
            "private": private,
        }
        if homepage:
            payload["homepage"] = homepage
        payload.update(options)

        path = f"/orgs/{org}/repos" if org else "/user/repos"
        return self.request("POST", path, json=payload)

    def get_repository(self, owner: str, repo: str) -> dict[str, Any]:
        """Fetch a repository descriptor."""
        return self.request("GET", f"/repos/{owner}/{repo}")

    # --- Contents ---

    def get_file(
        self,
        owner: str,
        repo: str,
        path: str,
        ref: str | None = None,
    ) -> RemoteFile | None:
        """Fetch a file's content and sha.

        Returns:
            The remote file, or None if it does not exist
        """
        params = {"ref": ref} if ref else None
        try:
            data = self.request("GET", _contents_path(owner, repo, path), params=params)
        except GitHubNotFoundError:
            return None

        if isinstance(data, list) or data.get("type") not in (None, "file"):
            raise GitHubClientError(f"{path} is not a file")

        # Content is only inlined for files up to 1MB
        encoded = data.get("content") or ""
        content = base64.b64decode(encoded) if data.get("encoding") == "base64" else b""
        return RemoteFile(path=data.get("path", path), content=content, sha=data["sha"])

    def put_file(
        self,
        owner: str,
        repo: str,
        path: str,
        content: bytes,
        message: str,
        branch: str | None = None,
        sha: str | None = None,
    ) -> dict[str, Any]:
        """Create or update a file.

        Args:
            sha: Current blob sha; required when replacing an existing file

        Returns:
            The API response with 'content' and 'commit' descriptors
        """
        payload: dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content).decode("ascii"),
        }
        if branch:
            payload["branch"] = branch
        if sha:
            payload["sha"] = sha
        return self.request("PUT", _contents_path(owner, repo, path), json=payload)


def _contents_path(owner: str, repo: str, path: str) -> str:
    return f"/repos/{owner}/{repo}/contents/{quote(path, safe='/')}"
