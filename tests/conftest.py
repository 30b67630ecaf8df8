"""Shared fixtures."""

from pathlib import Path

import pytest

from navoiy_deployer.github.client import (
    GitHubClientError,
    GitHubConflictError,
    GitHubNotFoundError,
)
from navoiy_deployer.models import RemoteFile
from navoiy_deployer.sync import git_blob_sha


class FakeGitHub:
    """In-memory stand-in for GitHubClient covering the calls the deployer makes."""

    def __init__(self, login: str = "testuser") -> None:
        self.login = login
        self.repos: dict[tuple[str, str], dict] = {}
        self.files: dict[tuple[str, str, str], bytes] = {}
        self.puts: list[dict] = []
        self.fail_paths: set[str] = set()
        self._commits = 0

    def __enter__(self) -> "FakeGitHub":
        return self

    def __exit__(self, *args) -> None:
        pass

    def add_repo(self, owner: str, name: str) -> None:
        self.repos[(owner, name)] = self._repo_payload(owner, name)

    def _repo_payload(self, owner: str, name: str) -> dict:
        return {
            "name": name,
            "owner": {"login": owner},
            "default_branch": "main",
            "html_url": f"https://github.com/{owner}/{name}",
        }

    @staticmethod
    def _sha(content: bytes) -> str:
        return git_blob_sha(content)

    def create_repository(
        self, name, description="", homepage=None, private=False, org=None, **options
    ):
        owner = org or self.login
        if (owner, name) in self.repos:
            raise GitHubConflictError("Repository creation failed: name already exists", 422)
        self.add_repo(owner, name)
        return self.repos[(owner, name)]

    def get_repository(self, owner, repo):
        if (owner, repo) not in self.repos:
            raise GitHubNotFoundError(f"Resource not found: /repos/{owner}/{repo}")
        return self.repos[(owner, repo)]

    def get_file(self, owner, repo, path, ref=None):
        content = self.files.get((owner, repo, path))
        if content is None:
            return None
        return RemoteFile(path=path, content=content, sha=self._sha(content))

    def put_file(self, owner, repo, path, content, message, branch=None, sha=None):
        if path in self.fail_paths:
            raise GitHubClientError(f"HTTP 500: simulated failure for {path}")
        key = (owner, repo, path)
        if key in self.files:
            if sha != self._sha(self.files[key]):
                raise GitHubConflictError(f"{path} does not match {sha}", 409)
        elif sha is not None:
            raise GitHubConflictError(f"{path} does not exist", 422)
        self.files[key] = content
        self.puts.append({"repo": f"{owner}/{repo}", "path": path, "message": message})
        self._commits += 1
        return {"content": {"path": path}, "commit": {"sha": f"commit{self._commits}"}}

    def repo_files(self, owner: str, repo: str) -> dict[str, bytes]:
        return {p: c for (o, r, p), c in self.files.items() if (o, r) == (owner, repo)}


@pytest.fixture
def fake_github() -> FakeGitHub:
    """Empty fake remote for the 'testuser' account."""
    return FakeGitHub()


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Minimal corpus with a lexicon and one text."""
    corpus = tmp_path / "corpus"
    (corpus / "annotations").mkdir(parents=True)
    (corpus / "texts").mkdir()
    (corpus / "annotations" / "semantic_lexicon_v1.json").write_text(
        """{
  "terms": [
    {"id": "ishq", "translations": {"english": ["love"]}},
    {"id": "yor"},
    {"id": "unknown_term", "translations": {}}
  ],
  "metadata": {"version": "1.0"}
}""",
        encoding="utf-8",
    )
    (corpus / "texts" / "ghazal_001.txt").write_text("Ko'ngul ichra...", encoding="utf-8")
    return corpus
