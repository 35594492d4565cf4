"""Tests for the end-to-end scaffolding workflow."""
from unittest.mock import Mock

import pytest

from ignite.config.project import ProjectConfig
from ignite.core.errors import BuildError, ExternalCommandError
from ignite.scaffold.core import ScaffoldManager
from ignite.services.command_runner import CommandRunner


class TestScaffoldManager:
    """Test project scaffolding."""

    def test_scaffold_project(self, tmp_path):
        project = tmp_path / "demo"
        project.mkdir()
        runner = Mock(spec=CommandRunner)

        manager = ScaffoldManager(runner=runner)
        result = manager.scaffold_project(ProjectConfig(
            path=project,
            database_type="mysql",
            controller_type="http",
            with_dockerfile=True,
        ))

        assert result == project.resolve()
        assert (project / "internal" / "mysql" / "migrations").is_dir()
        assert (project / "Dockerfile").exists()
        assert not (project / "gapi").exists()
        assert not (project / ".github").exists()

        sqlc = (project / ".envs" / "configs" / "sqlc.yaml").read_text()
        assert 'engine: "mysql"' in sqlc
        assert "sql_package" not in sqlc

        runner.init_go_module.assert_called_once_with("demo", cwd=project.resolve())
        runner.init_git_repository.assert_called_once_with(cwd=project.resolve())

    def test_creates_missing_project_path(self, tmp_path):
        project = tmp_path / "new" / "demo"

        ScaffoldManager(runner=Mock(spec=CommandRunner)).scaffold_project(ProjectConfig(path=project))

        assert (project / "README.md").is_file()
        assert (project / ".gitignore").is_file()

    def test_defaults_to_current_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        runner = Mock(spec=CommandRunner)

        result = ScaffoldManager(runner=runner).scaffold_project(ProjectConfig())

        assert result == tmp_path.resolve()
        assert (tmp_path / "cmd" / "server" / "main.go").exists()
        runner.init_go_module.assert_called_once_with(tmp_path.resolve().name, cwd=tmp_path.resolve())

    def test_build_failure_skips_initialization(self, tmp_path):
        (tmp_path / "cmd").write_text("in the way")
        runner = Mock(spec=CommandRunner)

        with pytest.raises(BuildError):
            ScaffoldManager(runner=runner).scaffold_project(ProjectConfig(path=tmp_path))

        runner.init_go_module.assert_not_called()
        runner.init_git_repository.assert_not_called()

    def test_go_module_failure_propagates(self, tmp_path):
        runner = Mock(spec=CommandRunner)
        runner.init_go_module.side_effect = ExternalCommandError(["go", "mod", "init", "x"], 1)

        with pytest.raises(ExternalCommandError):
            ScaffoldManager(runner=runner).scaffold_project(ProjectConfig(path=tmp_path))

        runner.init_git_repository.assert_not_called()

    def test_mock_runner(self, tmp_path):
        manager = ScaffoldManager(runner=CommandRunner(mock=True))
        manager.scaffold_project(ProjectConfig(path=tmp_path, with_workflow=True))

        assert (tmp_path / ".github" / "workflows" / "ci.yml").exists()

    def test_custom_template_dir(self, tmp_path):
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "skeleton.yml").write_text("app:\n  settings.yaml: ''\n")
        (templates / "settings.txt").write_text("never used")
        project = tmp_path / "project"
        project.mkdir()

        manager = ScaffoldManager(template_dir=templates, runner=Mock(spec=CommandRunner))
        manager.scaffold_project(ProjectConfig(path=project))

        assert (project / "app" / "settings.yaml").read_text() == ""
        assert not (project / "cmd").exists()
