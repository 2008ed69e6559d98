"""Configuration for locating the project and the bundled content."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field


# Directory inside a project that receives installed content
TARGET_DIR_NAME = ".agent"

# Directory inside the package that holds the bundled content
BUNDLE_DIR_NAME = "bundle"

# Manifest file that marks a directory as a bundle root
BUNDLE_MANIFEST_FILE = "bundle.yaml"

# Environment overrides
PROJECT_DIR_ENV = "CLOUDCRAFTER_PROJECT_DIR"
SOURCE_DIR_ENV = "CLOUDCRAFTER_SKILLS_SOURCE"


class SyncConfig(BaseModel):
    """Where content is read from and written to."""

    # Consumer project; installed content lands in <project_dir>/.agent
    project_dir: str = Field(default_factory=lambda: os.getcwd())

    target_dir_name: str = TARGET_DIR_NAME

    # Explicit bundle root, skips source resolution when set
    source_dir: str | None = None

    @classmethod
    def from_env(
        cls,
        project_dir: str | None = None,
        source_dir: str | None = None,
    ) -> SyncConfig:
        """
        Build a config from explicit values, falling back to environment variables.

        Args:
            project_dir: Project directory (overrides CLOUDCRAFTER_PROJECT_DIR)
            source_dir: Bundle root (overrides CLOUDCRAFTER_SKILLS_SOURCE)

        Returns:
            SyncConfig
        """
        values: dict[str, str] = {}

        project = project_dir or os.environ.get(PROJECT_DIR_ENV)
        if project:
            values["project_dir"] = project

        source = source_dir or os.environ.get(SOURCE_DIR_ENV)
        if source:
            values["source_dir"] = source

        return cls(**values)

    @property
    def target_root(self) -> Path:
        """Absolute path of the project's content root."""
        return Path(self.project_dir).resolve() / self.target_dir_name
