"""Tests for generate command."""

from pathlib import Path

import yaml

from navoiy_deployer.cli.generate import CONFIG_FILE, generate_config_yaml, run_generate
from navoiy_deployer.models import DeployConfig
from navoiy_deployer.services import ConfigService


class TestGenerateConfigYaml:
    """Tests for generate_config_yaml function."""

    def test_generates_valid_yaml(self):
        """Generated YAML is valid and parseable."""
        parsed = yaml.safe_load(generate_config_yaml())

        assert parsed["version"] == 1
        assert parsed["github"]["repo_name"] == "Navoiy-Terra-Corpus"
        assert parsed["terra"]["colors"]["primary"] == "#7B66DC"

    def test_includes_header_comments(self):
        content = generate_config_yaml()

        assert content.startswith("# navoiy-deployer configuration")
        assert "GITHUB_TOKEN" in content

    def test_matches_default_config(self):
        """Generated config loads back into the default DeployConfig."""
        parsed = yaml.safe_load(generate_config_yaml())

        assert DeployConfig(**parsed) == DeployConfig.default()

    def test_does_not_escape_unicode(self):
        assert "🌱 Active Projects" in generate_config_yaml()


class TestRunGenerate:
    """Tests for run_generate."""

    def test_creates_config(self, tmp_path: Path):
        exit_code = run_generate(tmp_path)

        assert exit_code == 0
        assert (tmp_path / CONFIG_FILE).exists()
        service = ConfigService(tmp_path)
        assert service.get_config() == DeployConfig.default()
        assert not service.has_config_error

    def test_creates_missing_project_root(self, tmp_path: Path):
        project = tmp_path / "new" / "project"

        assert run_generate(project) == 0
        assert (project / CONFIG_FILE).exists()

    def test_existing_config_untouched(self, tmp_path: Path, capsys):
        """Existing config is left alone and exit code is 1."""
        (tmp_path / CONFIG_FILE).write_text("github:\n  repo_name: Mine\n")

        exit_code = run_generate(tmp_path)

        assert exit_code == 1
        assert (tmp_path / CONFIG_FILE).read_text() == "github:\n  repo_name: Mine\n"
        assert "Nothing to generate" in capsys.readouterr().out
