"""Heading extraction for the table of contents."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unicodedata import normalize

from pymdownx.slugs import slugify as _md_slugify

from noogle.core.markdown import create_parser, split_frontmatter
from noogle.core.types import Heading

if TYPE_CHECKING:
    from collections.abc import Sequence

    from markdown_it.token import Token

# Same ids MkDocs assigns to headings.
_slugify_lower = _md_slugify(case="lower", separator="-")

_md = create_parser()


class Slugger:
    """MkDocs-style anchor ids, unique within one document.

    Repeated headings get ``-1``, ``-2`` ... suffixes.
    """

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}

    def slug(self, value: str) -> str:
        normalized = normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
        base = _slugify_lower(normalized.strip(), sep="-")
        slug = base
        while slug in self._seen:
            self._seen[base] += 1
            slug = f"{base}-{self._seen[base]}"
        self._seen[slug] = 0
        return slug


def _inline_text(token: Token) -> str:
    if not token.children:
        return token.content
    return "".join(child.content for child in token.children if child.type in {"text", "code_inline"})


def annotate_headings(tokens: Sequence[Token]) -> list[Heading]:
    """Assign an ``id`` to every ``heading_open`` token and collect the headings."""
    slugger = Slugger()
    headings: list[Heading] = []
    for index, token in enumerate(tokens):
        if token.type != "heading_open":
            continue
        value = _inline_text(tokens[index + 1])
        heading_id = slugger.slug(value)
        token.attrSet("id", heading_id)
        headings.append(Heading(level=int(token.tag[1:]), value=value, id=heading_id))
    return headings


def extract_headings(markdown: str) -> list[Heading]:
    """Return the headings of a markdown document in order of appearance."""
    if not markdown:
        return []
    _, body = split_frontmatter(markdown)
    return annotate_headings(_md.parse(body))
