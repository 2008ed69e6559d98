"""Core type definitions for the skills kit."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


# Recognized document extension for every kind of content
DOC_SUFFIX = ".md"


class ContentKind(str, Enum):
    """Kind of distributable content, named after its subdirectory."""

    SKILLS = "skills"
    AGENTS = "agents"
    WORKFLOWS = "workflows"

    @property
    def categorized(self) -> bool:
        """Skills are grouped into category directories; the rest are flat."""
        return self is ContentKind.SKILLS

    @property
    def singular(self) -> str:
        return self.value[:-1]


class CopyOutcome(str, Enum):
    """Result of a single copy attempt."""

    COPIED = "copied"
    SKIPPED_EXISTS = "skipped_exists"
    SKIPPED_NO_SOURCE = "skipped_no_source"

    @property
    def copied(self) -> bool:
        """Boolean view used by callers that only need success/failure."""
        return self is CopyOutcome.COPIED


class SkillCategory(BaseModel):
    """A named group of skills, backed by one directory."""

    name: str
    path: str
    skills: list[str] = Field(default_factory=list)


class ContentItem(BaseModel):
    """A single flat document (agent or workflow)."""

    name: str
    path: str
    kind: ContentKind


class SyncReport(BaseModel):
    """Names touched by a bulk operation.

    ``skipped`` always means the destination already existed and force
    was off. ``orphaned`` is only filled by update: installed names that
    no longer have a bundled source.
    """

    copied: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    orphaned: list[str] = Field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not (self.copied or self.skipped or self.orphaned)


class BundleManifest(BaseModel):
    """Metadata read from a bundle's ``bundle.yaml``."""

    name: str
    version: str = "0.0.0"
    description: str = ""
