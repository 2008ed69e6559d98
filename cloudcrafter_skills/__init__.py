"""CloudCrafter Skills - Salesforce development skills, agents and workflows for AI assistants."""

from cloudcrafter_skills.core.types import (
    ContentItem,
    ContentKind,
    CopyOutcome,
    SkillCategory,
    SyncReport,
)

__version__ = "1.2.0"

__all__ = [
    "ContentItem",
    "ContentKind",
    "CopyOutcome",
    "SkillCategory",
    "SyncReport",
]
