"""YAML frontmatter parsing for bundled Markdown documents."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml


FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*(?:\n(.*))?$", re.DOTALL)


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str] | None:
    """
    Split a Markdown document into frontmatter and body.

    Args:
        content: The raw file content

    Returns:
        Tuple of (frontmatter dict, markdown body) or None if there is no valid frontmatter
    """
    match = FRONTMATTER_RE.match(content)
    if not match:
        return None

    frontmatter_str, body = match.groups()
    try:
        frontmatter = yaml.safe_load(frontmatter_str)
    except yaml.YAMLError:
        return None

    if not isinstance(frontmatter, dict):
        return None
    return frontmatter, (body or "").strip()


def read_description(path: Path | str) -> str:
    """Return the ``description`` frontmatter field of a document, or ''."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return ""

    parsed = parse_frontmatter(content)
    if parsed is None:
        return ""
    frontmatter, _ = parsed
    return str(frontmatter.get("description") or "").strip()
