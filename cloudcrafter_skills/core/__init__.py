"""Core modules for the skills kit.

Primary modules:
- SourceResolver: Locate the bundled content root
- Catalog: Enumerate categories and items under a content root
- SyncEngine: Copy, update and remove content in a project
- types: Type definitions (SkillCategory, ContentItem, SyncReport, etc.)
"""

from cloudcrafter_skills.core.catalog import Catalog
from cloudcrafter_skills.core.config import SyncConfig
from cloudcrafter_skills.core.resolver import SourceResolver, default_resolver
from cloudcrafter_skills.core.sync import SyncEngine
from cloudcrafter_skills.core.types import (
    BundleManifest,
    ContentItem,
    ContentKind,
    CopyOutcome,
    SkillCategory,
    SyncReport,
)

__all__ = [
    # Types
    "BundleManifest",
    "ContentItem",
    "ContentKind",
    "CopyOutcome",
    "SkillCategory",
    "SyncReport",
    # Primary modules
    "Catalog",
    "SourceResolver",
    "SyncConfig",
    "SyncEngine",
    "default_resolver",
]
