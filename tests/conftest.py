"""Pytest configuration and fixtures for cloudcrafter-skills tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from cloudcrafter_skills.core.config import (
    BUNDLE_MANIFEST_FILE,
    PROJECT_DIR_ENV,
    SOURCE_DIR_ENV,
    TARGET_DIR_NAME,
)
from cloudcrafter_skills.core.sync import SyncEngine


def write_doc(path: Path, name: str, description: str = "") -> Path:
    """Write a small Markdown document with frontmatter."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        f"---\nname: {name}\ndescription: {description or name}\n---\n\n# {name}\n"
    )
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment from leaking into config."""
    monkeypatch.delenv(PROJECT_DIR_ENV, raising=False)
    monkeypatch.delenv(SOURCE_DIR_ENV, raising=False)


@pytest.fixture
def bundle_root(tmp_path: Path) -> Path:
    """Create a bundle with two skill categories, one agent and one workflow."""
    root = tmp_path / "bundle"
    skills = root / "skills"
    write_doc(skills / "apex" / "batch-apex.md", "batch-apex", "Batch jobs")
    write_doc(skills / "apex" / "queueable-apex.md", "queueable-apex", "Queueable jobs")
    write_doc(skills / "triggers" / "handler-framework.md", "handler-framework")
    write_doc(root / "agents" / "apex-code-reviewer.md", "apex-code-reviewer", "Reviews Apex")
    write_doc(root / "workflows" / "deploy-metadata.md", "deploy-metadata")
    (root / BUNDLE_MANIFEST_FILE).write_text(
        'name: Test Kit\nversion: "9.9.9"\ndescription: Fixture bundle\n'
    )
    return root


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create an empty consumer project."""
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def target_root(project_dir: Path) -> Path:
    """The project's (not yet created) .agent directory."""
    return project_dir / TARGET_DIR_NAME


@pytest.fixture
def engine(bundle_root: Path, target_root: Path) -> SyncEngine:
    """Create a SyncEngine between the fixture bundle and project."""
    return SyncEngine(bundle_root, target_root)
