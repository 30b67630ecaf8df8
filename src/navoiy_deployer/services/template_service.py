"""Template service for rendering the deployed static assets."""

from __future__ import annotations

import importlib.resources
import logging
from pathlib import Path
from string import Template

from ..models import DeployConfig
from ..utils import current_year

logger = logging.getLogger(__name__)

TEMPLATES_PACKAGE = "navoiy_deployer.data.templates"

PAGE_TEMPLATE = "navoiy-terra.html"
BADGE_TEMPLATE = "navoiy-badge.svg"
BADGE_SCRIPT_TEMPLATE = "badge-updater.js"
README_SECTION_TEMPLATE = "readme-section.md"
LANGUAGE_DOC_TEMPLATE = "plt-expansion.md"

# Output locations relative to the corpus directory
PAGE_OUTPUT = Path("navoiy-terra.html")
BADGE_OUTPUT = Path("assets") / "navoiy-badge.svg"
BADGE_SCRIPT_OUTPUT = Path("assets") / "badge-updater.js"


class TemplateService:
    """Service for loading bundled templates and rendering them from config."""

    def __init__(self, config: DeployConfig, year: int | None = None) -> None:
        """Initialize the template service.

        Args:
            config: Deploy configuration supplying names, URLs and colors
            year: Calendar year used for the "years since" counters (default: now)
        """
        self._config = config
        self.year = year if year is not None else current_year()

    @property
    def context(self) -> dict[str, str | int]:
        """Substitution values shared by all templates."""
        github = self._config.github
        navoiy = self._config.navoiy
        colors = self._config.terra.colors
        return {
            "owner": github.owner,
            "repo_name": github.repo_name,
            "repo_url": github.html_url,
            "owner_url": f"https://github.com/{github.owner}",
            "website": self._config.terra.website,
            "portrait": navoiy.portrait,
            "birth_year": navoiy.birth_year,
            "death_year": navoiy.death_year,
            "years_since_death": navoiy.years_since_death(self.year),
            "year_short": str(self.year)[-2:],
            "color_primary": colors.primary,
            "color_secondary": colors.secondary,
            "color_accent": colors.accent,
            "color_creative": colors.creative,
            "badge_color": colors.primary.lstrip("#"),
        }

    def load_template(self, name: str) -> str:
        """Read a bundled template by file name."""
        resource = importlib.resources.files(TEMPLATES_PACKAGE).joinpath(name)
        return resource.read_text(encoding="utf-8")

    def render(self, name: str) -> str:
        """Render a bundled template with the shared context.

        Raises:
            KeyError: If the template references an unknown placeholder
        """
        return Template(self.load_template(name)).substitute(self.context)

    def render_page(self) -> str:
        """Terra HTML page for the project website."""
        return self.render(PAGE_TEMPLATE)

    def render_badge(self) -> str:
        """SVG badge with the portrait and the years-since counter."""
        return self.render(BADGE_TEMPLATE)

    def render_badge_script(self) -> str:
        """JavaScript that refreshes the badge counters in the browser."""
        return self.render(BADGE_SCRIPT_TEMPLATE)

    def render_readme_section(self) -> str:
        """Markdown section announcing the project in the central README."""
        return self.render(README_SECTION_TEMPLATE).rstrip("\n")

    def render_language_doc(self) -> str:
        """Documentation of the expanded PLT layer."""
        return self.render(LANGUAGE_DOC_TEMPLATE).rstrip("\n")

    def write_assets(self, corpus_path: Path) -> list[Path]:
        """Write the page, badge and badge script into the corpus directory.

        Returns:
            Paths of the written files
        """
        outputs = [
            (PAGE_OUTPUT, self.render_page()),
            (BADGE_OUTPUT, self.render_badge()),
            (BADGE_SCRIPT_OUTPUT, self.render_badge_script()),
        ]
        written: list[Path] = []
        for relative, content in outputs:
            target = corpus_path / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
            logger.info("Wrote %s", target)
            written.append(target)
        return written
