"""Locate the bundled content shipped with the package.

The package may run from a source checkout, an editable install or a
regular site-packages install, so the bundle root is probed rather than
assumed.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from cloudcrafter_skills.core.config import BUNDLE_DIR_NAME, BUNDLE_MANIFEST_FILE
from cloudcrafter_skills.core.types import BundleManifest, ContentKind

logger = logging.getLogger(__name__)

# Upper bound on parent directories visited by the fallback search
MAX_PARENT_HOPS = 5


def is_bundle_root(path: Path) -> bool:
    """A bundle root holds at least one content subtree and the manifest."""
    if not (path / BUNDLE_MANIFEST_FILE).is_file():
        return False
    return any((path / kind.value).is_dir() for kind in ContentKind)


class SourceResolver:
    """Resolves the bundle root once and remembers it."""

    def __init__(
        self,
        anchor: Path | str | None = None,
        override: Path | str | None = None,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            anchor: Directory to search from. Defaults to this module's directory.
            override: Bundle root to use as-is, skipping the probe.
        """
        self.anchor = Path(anchor).resolve() if anchor else Path(__file__).resolve().parent
        self._override = Path(override).resolve() if override else None
        self._root: Path | None = None

    @property
    def default_candidate(self) -> Path:
        # core/ -> package dir -> bundle/
        return self.anchor.parent / BUNDLE_DIR_NAME

    @property
    def root(self) -> Path:
        """The bundle root, computed on first access."""
        if self._root is None:
            self._root = self._resolve()
        return self._root

    def _resolve(self) -> Path:
        if self._override is not None:
            logger.debug("Using bundle override %s", self._override)
            return self._override

        candidate = self.default_candidate
        if is_bundle_root(candidate):
            return candidate

        current = self.anchor
        for _ in range(MAX_PARENT_HOPS):
            probe = current / BUNDLE_DIR_NAME
            if is_bundle_root(probe):
                logger.debug("Found bundle at %s", probe)
                return probe
            if current.parent == current:
                break
            current = current.parent

        logger.debug("No bundle found near %s, falling back to %s", self.anchor, candidate)
        return candidate

    def load_manifest(self) -> BundleManifest | None:
        return load_manifest(self.root)


def load_manifest(root: Path | str) -> BundleManifest | None:
    """Read a bundle's manifest, or None if it is missing or malformed."""
    manifest_file = Path(root) / BUNDLE_MANIFEST_FILE
    if not manifest_file.is_file():
        return None

    try:
        data = yaml.safe_load(manifest_file.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError):
        return None

    if not isinstance(data, dict):
        return None

    try:
        return BundleManifest(**data)
    except ValidationError:
        return None


@lru_cache(maxsize=1)
def default_resolver() -> SourceResolver:
    """Process-wide resolver anchored at the installed package."""
    return SourceResolver()
