"""Configuration models for navoiy-deploy.yml."""

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_CORPUS_PATH = "/mnt/user-data/outputs/navoiy-terra-corpus"


def _validate_color(v: str) -> str:
    """Validate color is a hex code."""
    if not v.startswith("#"):
        raise ValueError("Color must be a hex code (e.g., #7B66DC)")
    hex_part = v[1:]
    if len(hex_part) not in (3, 6):
        raise ValueError("Hex color must be 3 or 6 characters (e.g., #fff or #ffffff)")
    if not all(c in "0123456789abcdefABCDEF" for c in hex_part):
        raise ValueError("Invalid hex color code")
    return v


class GitHubConfig(BaseModel):
    """Target repository and central README settings."""

    owner: str = Field(default="Secret-Uzbek", min_length=1)
    owner_type: str = Field(default="user", description="user or org")
    repo_name: str = Field(default="Navoiy-Terra-Corpus", min_length=1)
    description: str = Field(
        default=(
            "🕌 NAVOIY-TERRA v1.0 — First computational corpus of Alisher Navoi works "
            "with fractal semantic annotations "
            "(Chagatai-Uzbek-Russian-English-German-Uyghur-Dari-Pashto-Farsi)"
        )
    )
    private: bool = False
    license_template: str | None = "cc-by-4.0"
    central_repo: str = Field(default="FMP-CENTRAL-REPO", min_length=1)
    readme_path: str = "README.md"
    readme_anchor: str = Field(
        default=r"## 🌱 Active Projects\n",
        description="Regex; the project section is inserted right after its first match",
    )
    branch: str = Field(default="main", min_length=1)
    base_url: str = Field(
        default="api.github.com",
        description="API host (use a custom host for GitHub Enterprise)",
    )

    VALID_OWNER_TYPES: ClassVar[tuple[str, ...]] = ("user", "org")

    @field_validator("owner_type")
    @classmethod
    def validate_owner_type(cls, v: str) -> str:
        """Validate owner type is user or org."""
        if v not in cls.VALID_OWNER_TYPES:
            raise ValueError(
                f"Invalid owner_type '{v}'. Must be one of: {', '.join(cls.VALID_OWNER_TYPES)}"
            )
        return v

    @property
    def full_name(self) -> str:
        """Repository as owner/name."""
        return f"{self.owner}/{self.repo_name}"

    @property
    def html_url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo_name}"

    @property
    def central_html_url(self) -> str:
        return f"https://github.com/{self.owner}/{self.central_repo}"


class TerraColors(BaseModel):
    """Terra brand palette."""

    primary: str = "#7B66DC"  # Terra Purple
    secondary: str = "#4A90E2"  # Terra Blue
    accent: str = "#2E8B57"  # Terra Green
    creative: str = "#FF8C42"  # Terra Orange

    @field_validator("primary", "secondary", "accent", "creative")
    @classmethod
    def validate_color(cls, v: str) -> str:
        return _validate_color(v)


class TerraConfig(BaseModel):
    """Terra ecosystem branding and website."""

    colors: TerraColors = Field(default_factory=TerraColors)
    website: str = "https://fractal-metascience.org"
    project_slug: str = "navoiy-terra"

    @property
    def project_page_url(self) -> str:
        """URL of the project page on the Terra website."""
        return f"{self.website.rstrip('/')}/projects/{self.project_slug}"


class NavoiyConfig(BaseModel):
    """Facts about the poet used by the generated assets."""

    birth_year: int = 1441
    death_year: int = 1501
    portrait: str = (
        "https://upload.wikimedia.org/wikipedia/commons/thumb/d/d0/"
        "Alisher_Navoi.jpg/220px-Alisher_Navoi.jpg"
    )

    @model_validator(mode="after")
    def validate_years(self) -> "NavoiyConfig":
        """Death year must come after birth year."""
        if self.death_year <= self.birth_year:
            raise ValueError("death_year must be after birth_year")
        return self

    def years_since_death(self, year: int) -> int:
        return year - self.death_year


class DeployConfig(BaseModel):
    """Root configuration from navoiy-deploy.yml."""

    version: int = 1
    corpus_path: Path = Field(
        default=Path(DEFAULT_CORPUS_PATH),
        description="Corpus directory; written to, then uploaded",
    )
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    terra: TerraConfig = Field(default_factory=TerraConfig)
    navoiy: NavoiyConfig = Field(default_factory=NavoiyConfig)

    @classmethod
    def default(cls) -> "DeployConfig":
        """Return default configuration."""
        return cls()
