"""Sync engine: copy bundled content into a project and remove it again.

Expected outcomes (missing source, existing destination, nothing to
remove) are reported through return values. Filesystem errors are not
caught here and propagate to the caller; bulk operations do not roll
back what they already copied.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from cloudcrafter_skills.core.catalog import Catalog
from cloudcrafter_skills.core.config import SyncConfig
from cloudcrafter_skills.core.resolver import SourceResolver, default_resolver
from cloudcrafter_skills.core.types import (
    DOC_SUFFIX,
    ContentKind,
    CopyOutcome,
    SyncReport,
)

logger = logging.getLogger(__name__)


class SyncEngine:
    """Copies categories and items from a bundle root to a project root."""

    def __init__(self, source_root: Path | str, target_root: Path | str) -> None:
        """
        Initialize the engine.

        Args:
            source_root: Bundle root holding skills/, agents/ and workflows/ (read only)
            target_root: Project content root, usually <project>/.agent
        """
        self.source = Catalog(source_root)
        self.target = Catalog(target_root)

    @classmethod
    def from_config(
        cls,
        config: SyncConfig,
        resolver: SourceResolver | None = None,
    ) -> SyncEngine:
        """Build an engine for a config, resolving the bundle if it is not pinned."""
        if config.source_dir:
            source_root = Path(config.source_dir).resolve()
        else:
            source_root = (resolver or default_resolver()).root
        return cls(source_root, config.target_root)

    @property
    def source_root(self) -> Path:
        return self.source.root

    @property
    def target_root(self) -> Path:
        return self.target.root

    @staticmethod
    def is_valid_name(name: str) -> bool:
        """Names are single path components; anything else cannot exist in a catalog."""
        return bool(name) and name not in (".", "..") and "/" not in name and "\\" not in name

    @staticmethod
    def _entry_path(catalog: Catalog, kind: ContentKind, name: str) -> Path:
        if kind.categorized:
            return catalog.kind_root(kind) / name
        return catalog.kind_root(kind) / f"{name}{DOC_SUFFIX}"

    def source_path(self, kind: ContentKind, name: str) -> Path:
        return self._entry_path(self.source, kind, name)

    def target_path(self, kind: ContentKind, name: str) -> Path:
        return self._entry_path(self.target, kind, name)

    # ------------------------------------------------------------------
    # Single copy
    # ------------------------------------------------------------------

    def install(self, kind: ContentKind, name: str, force: bool = False) -> CopyOutcome:
        """
        Copy one category or item from the bundle into the project.

        Args:
            kind: Content kind
            name: Category name for skills, item name otherwise
            force: Overwrite an existing destination

        Returns:
            CopyOutcome describing what happened
        """
        if not self.is_valid_name(name):
            logger.debug("Rejecting %s name %r", kind.singular, name)
            return CopyOutcome.SKIPPED_NO_SOURCE

        source = self.source_path(kind, name)
        target = self.target_path(kind, name)

        if not source.exists():
            logger.debug("No bundled %s %r at %s", kind.singular, name, source)
            return CopyOutcome.SKIPPED_NO_SOURCE

        if target.exists() and not force:
            logger.debug("Skipping %s %r, %s already exists", kind.singular, name, target)
            return CopyOutcome.SKIPPED_EXISTS

        # Replace a destination of the wrong shape before copying over it
        if source.is_dir() != (target.is_dir() and not target.is_symlink()):
            self._discard(target)

        if source.is_dir():
            target.mkdir(parents=True, exist_ok=True)
            shutil.copytree(source, target, dirs_exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, target)

        logger.debug("Copied %s %r to %s", kind.singular, name, target)
        return CopyOutcome.COPIED

    def copy_category(self, name: str, force: bool = False) -> bool:
        """Copy a skill category. False if it is missing or already installed."""
        return self.install(ContentKind.SKILLS, name, force).copied

    def copy_item(self, kind: ContentKind, name: str, force: bool = False) -> bool:
        """Copy a category or item. False if it is missing or already installed."""
        return self.install(kind, name, force).copied

    # ------------------------------------------------------------------
    # Bulk copy
    # ------------------------------------------------------------------

    def copy_all(self, kind: ContentKind, force: bool = False) -> SyncReport:
        """
        Copy every bundled category or item of a kind.

        Names come from the bundle listing, so a skipped name always means
        the destination already existed and force was off.

        Args:
            kind: Content kind
            force: Overwrite existing destinations

        Returns:
            SyncReport with copied and skipped names in listing order
        """
        report = SyncReport()
        names = self.source.names(kind)

        self.target.kind_root(kind).mkdir(parents=True, exist_ok=True)

        for name in names:
            if self.install(kind, name, force).copied:
                report.copied.append(name)
            else:
                report.skipped.append(name)

        return report

    def copy_all_categories(self, force: bool = False) -> SyncReport:
        return self.copy_all(ContentKind.SKILLS, force)

    def copy_everything(self, force: bool = False) -> dict[ContentKind, SyncReport]:
        """Run copy_all for each kind that has bundled content."""
        reports: dict[ContentKind, SyncReport] = {}
        for kind in ContentKind:
            if not self.source.names(kind):
                continue
            reports[kind] = self.copy_all(kind, force)
        return reports

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update_installed(self, kind: ContentKind) -> SyncReport:
        """
        Refresh installed entries of a kind from the bundle.

        Entries present in the bundle are overwritten. Installed entries
        without a bundled source are left alone and reported as orphaned.
        Bundled entries that are not installed are not added.
        """
        report = SyncReport()
        available = set(self.source.names(kind))

        for name in self.target.names(kind):
            if name not in available:
                report.orphaned.append(name)
                continue
            if self.install(kind, name, force=True).copied:
                report.copied.append(name)

        return report

    def update_everything(self) -> dict[ContentKind, SyncReport]:
        return {kind: self.update_installed(kind) for kind in ContentKind}

    def has_installed(self, kind: ContentKind | None = None) -> bool:
        """True if anything (of ``kind``, when given) is installed in the project."""
        if kind is None:
            return self.target.has_content()
        return bool(self.target.names(kind))

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def remove(self, kind: ContentKind, name: str) -> bool:
        """
        Delete an installed category or item.

        Args:
            kind: Content kind
            name: Category name for skills, item name otherwise

        Returns:
            True if it was removed, False if it was not installed
        """
        if not self.is_valid_name(name):
            logger.debug("Rejecting %s name %r", kind.singular, name)
            return False

        target = self.target_path(kind, name)

        if not target.exists() and not target.is_symlink():
            logger.debug("Nothing to remove for %s %r at %s", kind.singular, name, target)
            return False

        self._discard(target)
        logger.debug("Removed %s %r from %s", kind.singular, name, target)
        return True

    def remove_category(self, name: str) -> bool:
        return self.remove(ContentKind.SKILLS, name)

    @staticmethod
    def _discard(path: Path) -> None:
        """Delete a file, link or directory tree; missing paths are ignored."""
        if path.is_dir() and not path.is_symlink():
            try:
                shutil.rmtree(path)
            except FileNotFoundError:
                logger.debug("%s vanished during removal", path)
        else:
            path.unlink(missing_ok=True)
