"""Tests for deploy configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from navoiy_deployer.models import DeployConfig, GitHubConfig, NavoiyConfig, TerraColors


class TestDeployConfigDefaults:
    """Defaults reproduce the published Navoiy-Terra deployment."""

    def test_default(self):
        config = DeployConfig.default()

        assert config.github.owner == "Secret-Uzbek"
        assert config.github.repo_name == "Navoiy-Terra-Corpus"
        assert config.github.branch == "main"
        assert config.github.license_template == "cc-by-4.0"
        assert config.terra.colors.primary == "#7B66DC"
        assert config.navoiy.birth_year == 1441
        assert config.navoiy.death_year == 1501
        assert config.corpus_path == Path("/mnt/user-data/outputs/navoiy-terra-corpus")

    def test_urls(self):
        config = DeployConfig.default()

        assert config.github.html_url == "https://github.com/Secret-Uzbek/Navoiy-Terra-Corpus"
        assert config.github.central_html_url == "https://github.com/Secret-Uzbek/FMP-CENTRAL-REPO"
        assert (
            config.terra.project_page_url
            == "https://fractal-metascience.org/projects/navoiy-terra"
        )


class TestValidation:
    """Tests for field validation."""

    def test_invalid_owner_type(self):
        with pytest.raises(ValidationError, match="owner_type"):
            GitHubConfig(owner_type="team")

    def test_empty_repo_name(self):
        with pytest.raises(ValidationError):
            GitHubConfig(repo_name="")

    @pytest.mark.parametrize("color", ["purple", "#12", "#GGGGGG"])
    def test_invalid_colors(self, color: str):
        with pytest.raises(ValidationError):
            TerraColors(primary=color)

    def test_short_hex_color(self):
        assert TerraColors(accent="#fff").accent == "#fff"

    def test_death_before_birth(self):
        with pytest.raises(ValidationError, match="death_year"):
            NavoiyConfig(birth_year=1501, death_year=1441)

    def test_years_since_death(self):
        assert NavoiyConfig().years_since_death(2026) == 525
