"""Assembly of a single entry page.

Everything here is a pure transformation over already loaded corpus data. An
absent entry, signature, position or alias list only removes the matching
section from the page; nothing is raised for missing data.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from noogle.core.headings import extract_headings
from noogle.core.nix_types import find_type, interpret_type
from noogle.core.positions import Found, PositionResult, select_position, select_raw_position, source_url
from noogle.core.primop import primop_description
from noogle.core.rendering import render_html
from noogle.core.resolver import find_doc
from noogle.core.types import Doc, FilePosition, Heading, TypeSignature
from noogle.engine import filters
from noogle.engine.template_loader import TemplateLoader
from noogle.theme import THEMES, css_variables

if TYPE_CHECKING:
    from noogle.core.config import NoogleConfig

logger = logging.getLogger(__name__)

ENTRY_TEMPLATE = "entry.html.jinja2"
INDEX_TEMPLATE = "index.html.jinja2"


@dataclass(frozen=True, slots=True)
class AliasLink:
    href: str
    label: str


@dataclass(slots=True)
class PageContext:
    """Everything the entry template needs, resolved up front."""

    path: list[str]
    doc: Doc | None
    types: TypeSignature
    source: str
    body_html: str | None
    headings: list[Heading]
    position: PositionResult
    raw_position: PositionResult
    edit_url: str | None = None
    raw_source_url: str | None = None
    aliases: list[AliasLink] = field(default_factory=list)

    @property
    def title(self) -> str | None:
        return self.doc.meta.title if self.doc else None

    @property
    def is_canonical_primop(self) -> bool:
        if self.doc is None:
            return False
        return self.doc.meta.is_primop and self.doc.meta.count_applied == 0

    @property
    def is_experimental(self) -> bool:
        if not self.is_canonical_primop:
            return False
        primop_meta = self.doc.meta.primop_meta
        return bool(primop_meta and primop_meta.experimental)

    @property
    def has_position(self) -> bool:
        return isinstance(self.position, Found)


def assemble_source(doc: Doc | None) -> str:
    """The markdown handed to the renderer.

    Primops with metadata get their generated description directly in front
    of the body.
    """
    if doc is None:
        return ""
    body = doc.body
    meta = doc.meta
    if meta.is_primop and meta.primop_meta is not None:
        return primop_description(meta.primop_meta) + body
    return body


def alias_links(aliases: Iterable[Sequence[str]] | None, route_prefix: str = "/f") -> list[AliasLink]:
    return [AliasLink(href=filters.route(alias, route_prefix), label=filters.dotted(alias)) for alias in aliases or []]


def derive_types(doc: Doc | None) -> TypeSignature:
    if doc is None:
        return TypeSignature()
    signature = doc.meta.signature or find_type(doc) or ""
    return interpret_type(doc.name, signature)


class PageBuilder:
    """Builds and renders entry pages with the site configuration."""

    def __init__(self, config: NoogleConfig, loader: TemplateLoader | None = None) -> None:
        self.config = config
        self.loader = loader or TemplateLoader()

    def _link(self, position: FilePosition) -> str:
        source = self.config.source
        return source_url(source.base_url, position, source.strip_components, source.repo_root)

    def build(self, path: Sequence[str], doc: Doc | None) -> PageContext:
        """Resolve all display metadata of ``doc`` shown at ``path``."""
        meta = doc.meta if doc else None
        logger.debug("Building page %s: %s", ".".join(path), meta)

        position = select_position(meta)
        raw_position = select_raw_position(meta)
        source = assemble_source(doc)

        return PageContext(
            path=list(path),
            doc=doc,
            types=derive_types(doc),
            source=source,
            body_html=render_html(source),
            # The table of contents covers the documentation body only.
            headings=extract_headings(doc.body if doc else ""),
            position=position,
            raw_position=raw_position,
            edit_url=self._link(position.position) if isinstance(position, Found) else None,
            raw_source_url=self._link(raw_position.position) if isinstance(raw_position, Found) else None,
            aliases=alias_links(meta.aliases if meta else None, self.config.site.route_prefix),
        )

    def build_path(self, corpus: Iterable[Doc], path: Sequence[str]) -> PageContext:
        """Look up ``path`` in the corpus and build its page."""
        doc = find_doc(corpus, path)
        if doc is None:
            logger.info("No entry found for %s", ".".join(path))
        return self.build(path, doc)

    def _shell(self) -> dict[str, str]:
        site = self.config.site
        return {
            "site_title": site.title,
            "theme_css": css_variables(THEMES[site.theme]),
            "route_prefix": site.route_prefix,
        }

    def render(self, page: PageContext) -> str:
        """Render a full HTML document for an entry page."""
        return self.loader.render_template(ENTRY_TEMPLATE, page=page, **self._shell())

    def render_index(self, docs: Iterable[Doc]) -> str:
        """Render the landing page listing every entry."""
        return self.loader.render_template(INDEX_TEMPLATE, docs=list(docs), **self._shell())
