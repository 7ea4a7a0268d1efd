"""Shared markdown parser setup and frontmatter handling."""

from __future__ import annotations

import logging
from typing import Any

import frontmatter
import yaml
from markdown_it import MarkdownIt

logger = logging.getLogger(__name__)


def create_parser() -> MarkdownIt:
    """CommonMark with raw HTML and GFM tables, as used by nixpkgs doc comments."""
    return MarkdownIt("commonmark", {"html": True}).enable("table")


def split_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Parse YAML frontmatter using python-frontmatter.

    Returns:
        Tuple of (metadata dict, body string). If parsing fails or metadata is not a
        mapping, metadata will be an empty dict and the original content is returned.

    """
    if not content.startswith("---"):
        return {}, content

    try:
        parsed = frontmatter.loads(content)
    except (yaml.YAMLError, ValueError) as exc:
        logger.warning("Failed to parse frontmatter content: %s", exc)
        return {}, content

    raw_metadata = parsed.metadata or {}
    if not isinstance(raw_metadata, dict):
        logger.warning("Frontmatter metadata is not a mapping: %s", type(raw_metadata).__name__)
        return {}, parsed.content

    return dict(raw_metadata), parsed.content
