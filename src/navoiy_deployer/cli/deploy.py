"""Deploy command: expand the corpus, render assets, push everything to GitHub."""

from __future__ import annotations

import logging
from pathlib import Path

from ..github.client import GitHubAuthError, GitHubClient, GitHubClientError
from ..models import (
    DeployConfig,
    FileUploadResult,
    ReadmePatchResult,
    ReadmePatchStatus,
    RepositoryHandle,
    UploadResult,
    UploadStatus,
)
from ..services import LexiconError, TemplateService, expand_lexicon, write_language_doc
from ..sync import RepositorySynchronizer, iter_file_paths, relative_path
from .output import error, header, info, link, step, success, warning

logger = logging.getLogger(__name__)

README_COMMIT_MESSAGE = "🕌 Add Navoiy-Terra-Corpus project"


def run_deploy(
    config: DeployConfig,
    corpus_path: Path,
    dry_run: bool = False,
    skip_readme: bool = False,
    year: int | None = None,
) -> int:
    """Run the full deployment.

    Args:
        config: Deploy configuration
        corpus_path: Corpus directory (assets are written here, then uploaded)
        dry_run: Do the local steps only and show what would be pushed
        skip_readme: Do not patch the central repository README
        year: Year used by the rendered counters (default: current year)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    header("NAVOIY-TERRA GITHUB DEPLOYER v1.0")
    header("=" * 37)

    if not corpus_path.is_dir():
        error(f"Corpus directory not found: {corpus_path}")
        return 1

    templates = TemplateService(config, year=year)

    # Local steps
    try:
        _expand_plt_layer(corpus_path, templates)
        _generate_assets(corpus_path, templates)
    except (LexiconError, OSError) as e:
        logger.exception("Local generation failed")
        error(f"Failed to prepare corpus: {e}")
        return 1

    if dry_run:
        _display_dry_run(config, corpus_path, templates, skip_readme)
        return 0

    try:
        client = GitHubClient.from_environment(config.github.base_url)
    except GitHubAuthError as e:
        error(f"GitHub authentication failed: {e}")
        return 1

    with client:
        synchronizer = RepositorySynchronizer(client)
        try:
            repository = _create_repository(synchronizer, config)
            upload = _upload_files(synchronizer, repository, corpus_path, config.github.branch)
            if not skip_readme:
                _update_central_repo(synchronizer, config, templates)
        except GitHubClientError as e:
            logger.exception("Deployment failed")
            error(f"Deployment failed: {e}")
            return 1

    _display_links(config)

    if upload.has_errors:
        error(f"{len(upload.failed)} file(s) failed to upload")
        return 1

    print()
    success("Deployment complete")
    return 0


def _expand_plt_layer(corpus_path: Path, templates: TemplateService) -> None:
    step(1, "Expanding PLT layer...")
    expand_lexicon(corpus_path)
    write_language_doc(corpus_path, templates.render_language_doc())
    success("PLT layer expanded to 9 languages")


def _generate_assets(corpus_path: Path, templates: TemplateService) -> None:
    step(2, "Generating Terra page and badge...")
    for path in templates.write_assets(corpus_path):
        success(relative_path(corpus_path, path), indent=2)


def _create_repository(
    synchronizer: RepositorySynchronizer, config: DeployConfig
) -> RepositoryHandle:
    step(3, "Creating GitHub repository...")
    repository = synchronizer.ensure_repository(
        config.github, homepage=config.terra.project_page_url
    )
    if repository.created:
        success(f"Repository created: {repository.html_url}")
    else:
        warning(f"Repository already exists, using it: {repository.full_name}")
    return repository


def _upload_files(
    synchronizer: RepositorySynchronizer,
    repository: RepositoryHandle,
    corpus_path: Path,
    branch: str,
) -> UploadResult:
    step(4, "Uploading files...")
    result = synchronizer.upload_tree(corpus_path, repository, branch, on_result=_report_file)
    _display_upload_summary(result)
    return result


def _report_file(result: FileUploadResult) -> None:
    if result.status is UploadStatus.FAILED:
        error(f"{result.path}: {result.error}", indent=2)
    elif result.status is UploadStatus.UNCHANGED:
        info(f"{result.path} (unchanged)", indent=2)
    else:
        success(result.path, indent=2)


def _display_upload_summary(result: UploadResult) -> None:
    print()
    print("Upload Summary:")
    print(f"  Created: {result.created}")
    print(f"  Updated: {result.updated}")
    print(f"  Unchanged: {result.unchanged}")
    print(f"  Failed: {len(result.failed)}")


def _update_central_repo(
    synchronizer: RepositorySynchronizer,
    config: DeployConfig,
    templates: TemplateService,
) -> ReadmePatchResult:
    github = config.github
    step(5, f"Updating {github.central_repo}...")
    result = synchronizer.patch_readme(
        github.owner,
        github.central_repo,
        templates.render_readme_section(),
        anchor=github.readme_anchor,
        path=github.readme_path,
        branch=github.branch,
        message=README_COMMIT_MESSAGE,
    )
    if result.status is ReadmePatchStatus.PATCHED:
        success(f"{github.central_repo} updated")
    elif result.status is ReadmePatchStatus.ALREADY_PRESENT:
        info(f"{github.central_repo} already lists the project")
    else:
        warning(f"Anchor not found in {github.readme_path}, README left unchanged")
    return result


def _display_links(config: DeployConfig) -> None:
    print()
    print("Links:")
    link("Repository", config.github.html_url)
    link("Terra page", config.terra.project_page_url)
    link("FMP Central", config.github.central_html_url)


def _display_dry_run(
    config: DeployConfig,
    corpus_path: Path,
    templates: TemplateService,
    skip_readme: bool,
) -> None:
    """Display what a real run would push."""
    paths = iter_file_paths(corpus_path)
    print()
    print(f"[DRY RUN] Would upload {len(paths)} file(s) to {config.github.full_name}:")
    for path in paths:
        print(f"  - {relative_path(corpus_path, path)}")
    print()
    if skip_readme:
        return
    print(f"[DRY RUN] Would insert into {config.github.central_repo}/{config.github.readme_path}:")
    print()
    print(templates.render_readme_section())
    print()
