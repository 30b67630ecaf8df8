"""Configuration service for loading navoiy-deploy.yml."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..models import DeployConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading and caching the deploy configuration."""

    CONFIG_FILE = "navoiy-deploy.yml"

    def __init__(self, project_root: Path, config_file: str | None = None) -> None:
        """Initialize the config service.

        Args:
            project_root: Directory containing the config file
            config_file: Config file name or relative path (default: navoiy-deploy.yml)
        """
        self.project_root = project_root
        self.config_file = config_file or self.CONFIG_FILE
        self._config: DeployConfig | None = None
        self._config_error: str | None = None

    @property
    def config_path(self) -> Path:
        return self.project_root / self.config_file

    @property
    def has_config_error(self) -> bool:
        """Check if there was an error loading config."""
        return self._config_error is not None

    @property
    def config_error(self) -> str | None:
        """Get the config error message if any."""
        return self._config_error

    @property
    def corpus_path(self) -> Path:
        """Corpus directory, resolved against the project root when relative."""
        path = self.get_config().corpus_path
        return path if path.is_absolute() else self.project_root / path

    def get_config(self) -> DeployConfig:
        """Get configuration, loading from file if not cached."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def reload(self) -> None:
        """Clear cached configuration, forcing reload on next access."""
        self._config = None
        self._config_error = None

    def _load_config(self) -> DeployConfig:
        """Load configuration from file or return default."""
        config_path = self.config_path
        self._config_error = None

        if not config_path.exists():
            logger.debug("No %s found, using defaults", self.config_file)
            return DeployConfig.default()

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)

            if data is None:
                self._config_error = f"{self.config_file} is empty"
                logger.warning(self._config_error)
                return DeployConfig.default()

            config = DeployConfig(**data)
            logger.info("Loaded %s for %s", self.config_file, config.github.full_name)
            return config

        except yaml.YAMLError as e:
            self._config_error = f"Invalid YAML in {self.config_file}: {e}"
            logger.warning(self._config_error)
            return DeployConfig.default()

        except (ValidationError, TypeError) as e:
            self._config_error = f"Error loading {self.config_file}: {e}"
            logger.warning(self._config_error)
            return DeployConfig.default()
