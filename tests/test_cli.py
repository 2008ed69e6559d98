"""Tests for the command-line interface."""

from __future__ import annotations

from pathlib import Path

import pytest

from cloudcrafter_skills import __version__
from cloudcrafter_skills.cli.main import create_parser, main
from cloudcrafter_skills.core.config import SOURCE_DIR_ENV


@pytest.fixture
def run(bundle_root: Path, project_dir: Path):
    """Run the CLI against the fixture bundle and project."""

    def _run(*args: str) -> int:
        return main(["--dir", str(project_dir), "--source", str(bundle_root), *args])

    return _run


class TestParser:
    """Tests for argument parsing."""

    def test_help_lists_commands(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that help mentions every command."""
        with pytest.raises(SystemExit) as exc:
            create_parser().parse_args(["--help"])

        assert exc.value.code == 0
        out = capsys.readouterr().out
        for command in ("init", "add", "list", "update", "remove"):
            assert command in out

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that --version prints the package version."""
        with pytest.raises(SystemExit):
            main(["--version"])

        assert __version__ in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that running without a command shows usage."""
        assert main([]) == 0
        assert "usage:" in capsys.readouterr().out

    def test_subcommand_dir_wins(self) -> None:
        """Test that the subcommand --dir is parsed separately."""
        args = create_parser().parse_args(["--dir", "global", "list", "--dir", "local"])
        assert args.dir == "global"
        assert args.subdir == "local"

    def test_rejects_unknown_kind(self) -> None:
        """Test that --kind only accepts known kinds."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["add", "apex", "--kind", "plugins"])


class TestInitCommand:
    """Tests for init."""

    def test_init_installs_everything(
        self, run, project_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a fresh init."""
        assert run("init") == 0

        agent = project_dir / ".agent"
        assert (agent / "skills" / "apex" / "batch-apex.md").exists()
        assert (agent / "skills" / "apex" / "queueable-apex.md").exists()
        assert (agent / "skills" / "triggers" / "handler-framework.md").exists()
        assert (agent / "agents" / "apex-code-reviewer.md").exists()
        assert (agent / "workflows" / "deploy-metadata.md").exists()

        out = capsys.readouterr().out
        assert "Installed 2 skill categories" in out

    def test_init_twice_skips(
        self, run, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a second init skips existing content."""
        run("init")
        capsys.readouterr()

        assert run("init") == 0

        out = capsys.readouterr().out
        assert "Skipped 2 existing skill categories" in out
        assert "Installed 2 skill categories" not in out

    def test_init_force(self, run, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that --force reinstalls everything."""
        run("init")
        capsys.readouterr()

        assert run("init", "--force") == 0

        out = capsys.readouterr().out
        assert "Installed 2 skill categories" in out
        assert "Skipped" not in out

    def test_init_empty_bundle(
        self, project_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that an empty bundle is an error."""
        code = main(["--dir", str(project_dir), "--source", str(tmp_path / "none"), "init"])

        assert code == 1
        assert "No skills" in capsys.readouterr().err

    def test_source_from_environment(
        self,
        bundle_root: Path,
        project_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that the bundle root can come from the environment."""
        monkeypatch.setenv(SOURCE_DIR_ENV, str(bundle_root))

        assert main(["init", "--dir", str(project_dir)]) == 0
        assert (project_dir / ".agent" / "skills" / "apex").is_dir()


class TestAddCommand:
    """Tests for add."""

    def test_add_category(
        self, run, project_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test adding one category."""
        assert run("add", "apex") == 0

        apex = project_dir / ".agent" / "skills" / "apex"
        assert sorted(p.name for p in apex.iterdir()) == [
            "batch-apex.md",
            "queueable-apex.md",
        ]
        assert "Installed apex category with 2 skills" in capsys.readouterr().out

    def test_add_unknown_category(
        self, run, project_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that an unknown category fails without creating anything."""
        assert run("add", "nonexistent-category") == 1

        captured = capsys.readouterr()
        assert "not found" in captured.err
        assert "apex" in captured.out
        assert not (project_dir / ".agent" / "skills" / "nonexistent-category").exists()

    def test_add_existing(self, run, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that adding twice warns but succeeds."""
        run("add", "apex")
        capsys.readouterr()

        assert run("add", "apex") == 0
        assert "already exists" in capsys.readouterr().out

    def test_add_agent(self, run, project_dir: Path) -> None:
        """Test adding a flat item."""
        assert run("add", "apex-code-reviewer", "--kind", "agents") == 0
        assert (project_dir / ".agent" / "agents" / "apex-code-reviewer.md").exists()


class TestListCommand:
    """Tests for list."""

    def test_list(self, run, capsys: pytest.CaptureFixture[str]) -> None:
        """Test listing available content."""
        assert run("list") == 0

        out = capsys.readouterr().out
        assert "Test Kit v9.9.9" in out
        assert "apex" in out
        assert "triggers" in out
        assert "2 categories, 3 skills (0 installed)" in out
        assert "apex-code-reviewer" in out
        assert "deploy-metadata" in out
        assert "batch-apex" not in out

    def test_list_verbose_after_add(self, run, capsys: pytest.CaptureFixture[str]) -> None:
        """Test verbose listing shows skills and install counts."""
        run("add", "apex")
        capsys.readouterr()

        assert run("list", "--verbose") == 0

        out = capsys.readouterr().out
        assert "batch-apex" in out
        assert "Batch jobs" in out
        assert "(2 installed)" in out


class TestUpdateCommand:
    """Tests for update."""

    def test_update_nothing_installed(self, run, capsys: pytest.CaptureFixture[str]) -> None:
        """Test update on a fresh project."""
        assert run("update") == 0
        assert "No skills installed yet" in capsys.readouterr().out

    def test_update_installed(self, run, capsys: pytest.CaptureFixture[str]) -> None:
        """Test update after init."""
        run("init")
        capsys.readouterr()

        assert run("update") == 0
        assert "Updated 2 skill categories" in capsys.readouterr().out


class TestRemoveCommand:
    """Tests for remove."""

    def test_remove_installed(
        self, run, project_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test removing an installed category."""
        run("add", "apex")
        capsys.readouterr()

        assert run("remove", "apex") == 0

        assert "Removed apex category (2 skills)" in capsys.readouterr().out
        assert not (project_dir / ".agent" / "skills" / "apex").exists()

    def test_remove_twice(self, run, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that removing a missing category fails."""
        run("add", "apex")
        run("remove", "apex")
        capsys.readouterr()

        assert run("remove", "apex") == 1
        assert "is not installed" in capsys.readouterr().err

    def test_remove_workflow(self, run, project_dir: Path) -> None:
        """Test removing a flat item."""
        run("add", "deploy-metadata", "--kind", "workflows")

        assert run("remove", "deploy-metadata", "--kind", "workflows") == 0
        assert not (project_dir / ".agent" / "workflows" / "deploy-metadata.md").exists()
