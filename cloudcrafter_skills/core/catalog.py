"""Catalog reader: enumerate content under a content root.

The filesystem is the catalog. Nothing is cached and there is no index
file; every call re-reads the directories.
"""

from __future__ import annotations

from pathlib import Path

from cloudcrafter_skills.core.types import (
    DOC_SUFFIX,
    ContentItem,
    ContentKind,
    SkillCategory,
)


def _document_names(directory: Path) -> list[tuple[str, Path]]:
    """(name, path) for each Markdown file directly inside ``directory``."""
    documents: list[tuple[str, Path]] = []
    for entry in sorted(directory.iterdir()):
        if not entry.is_file():
            continue
        if not entry.name.endswith(DOC_SUFFIX):
            continue
        documents.append((entry.name[: -len(DOC_SUFFIX)], entry))
    return documents


def list_categories(root: Path | str) -> list[SkillCategory]:
    """
    List skill categories under a skills root.

    Args:
        root: Directory whose subdirectories are categories (may not exist)

    Returns:
        List of SkillCategory, empty if the root does not exist
    """
    root = Path(root)
    if not root.is_dir():
        return []

    categories: list[SkillCategory] = []
    for entry in sorted(root.iterdir()):
        if entry.name.startswith(".") or not entry.is_dir():
            continue
        categories.append(
            SkillCategory(
                name=entry.name,
                path=str(entry.resolve()),
                skills=[name for name, _ in _document_names(entry)],
            )
        )
    return categories


def list_documents(root: Path | str, kind: ContentKind) -> list[ContentItem]:
    """
    List flat documents (agents or workflows) under a root.

    Args:
        root: Directory holding the documents (may not exist)
        kind: Kind recorded on each returned item

    Returns:
        List of ContentItem, empty if the root does not exist
    """
    root = Path(root)
    if not root.is_dir():
        return []

    return [
        ContentItem(name=name, path=str(path.resolve()), kind=kind)
        for name, path in _document_names(root)
    ]


class Catalog:
    """Read-only view of one content root (bundle or project ``.agent``)."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def kind_root(self, kind: ContentKind) -> Path:
        return self.root / kind.value

    def categories(self) -> list[SkillCategory]:
        return list_categories(self.kind_root(ContentKind.SKILLS))

    def items(self, kind: ContentKind) -> list[ContentItem]:
        """Flat items of ``kind``; skills are reported through categories()."""
        if kind.categorized:
            raise ValueError(f"{kind.value} are categorized, use categories()")
        return list_documents(self.kind_root(kind), kind)

    def names(self, kind: ContentKind) -> list[str]:
        """Top-level names of ``kind``: category names for skills, item names otherwise."""
        if kind.categorized:
            return [category.name for category in self.categories()]
        return [item.name for item in self.items(kind)]

    def find_category(self, name: str) -> SkillCategory | None:
        for category in self.categories():
            if category.name == name:
                return category
        return None

    def find_item(self, kind: ContentKind, name: str) -> ContentItem | None:
        for item in self.items(kind):
            if item.name == name:
                return item
        return None

    def count_items(self, kind: ContentKind) -> int:
        """Number of documents of ``kind``, counting every skill in every category."""
        if kind.categorized:
            return sum(len(category.skills) for category in self.categories())
        return len(self.items(kind))

    def has_content(self) -> bool:
        """True if any kind has at least one entry."""
        return any(self.names(kind) for kind in ContentKind)
