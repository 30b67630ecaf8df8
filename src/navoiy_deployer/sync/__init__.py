"""GitHub repository sync package."""

from .engine import RepositorySynchronizer, git_blob_sha, insert_after_anchor, section_heading
from .file_walker import collect_files, iter_file_paths, read_entry, relative_path

__all__ = [
    "RepositorySynchronizer",
    "collect_files",
    "git_blob_sha",
    "insert_after_anchor",
    "iter_file_paths",
    "read_entry",
    "relative_path",
    "section_heading",
]
