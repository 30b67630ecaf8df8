"""Generate command for creating a default deploy config."""

import logging
from pathlib import Path

import yaml

from ..models import DeployConfig
from .output import info, success

logger = logging.getLogger(__name__)

CONFIG_FILE = "navoiy-deploy.yml"

# Header comments for generated file
CONFIG_HEADER = """\
# navoiy-deployer configuration
#
# corpus_path: Corpus directory. Generated assets are written here and the
#   whole tree is then uploaded. Relative paths are resolved against the
#   directory containing this file.
#
# github:
#   owner / owner_type: Account owning the repositories (user or org)
#   repo_name: Repository created (or reused) for the corpus
#   central_repo: Repository whose README gets the project section
#   readme_anchor: Regex; the section is inserted right after its first match
#   branch: Branch written to in both repositories
#   base_url: API host, change for GitHub Enterprise
#
# The token is never stored here. Export GITHUB_TOKEN or run 'gh auth login'.

"""


def generate_config_yaml() -> str:
    """Generate YAML config from the default DeployConfig model.

    Uses DeployConfig.default() as the single source of truth,
    ensuring generated config always matches internal defaults.
    """
    config_dict = DeployConfig.default().model_dump(mode="json")
    yaml_content = yaml.safe_dump(
        config_dict, default_flow_style=False, sort_keys=False, allow_unicode=True
    )
    return CONFIG_HEADER + yaml_content


def run_generate(project_root: Path, config_file: str = CONFIG_FILE) -> int:
    """
    Generate default configuration.

    Args:
        project_root: Directory where the config file will be created
        config_file: Config file name

    Returns:
        Exit code (0 = success, 1 = nothing to do)
    """
    config_path = project_root / config_file

    if config_path.exists():
        info(f"Config exists: {config_path}")
        print("Nothing to generate.")
        return 1

    if not project_root.exists():
        project_root.mkdir(parents=True)

    config_path.write_text(generate_config_yaml(), encoding="utf-8")
    logger.info("Generated %s", config_path)
    success(f"Generated config: {config_path}")
    return 0
