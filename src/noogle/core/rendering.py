"""Markdown rendering for entry bodies."""

from markdown_it.token import Token

from noogle.core.headings import annotate_headings
from noogle.core.markdown import create_parser, split_frontmatter

_md = create_parser()

# The page title is the only h1; body headings move one level down.
MAX_HEADING_LEVEL = 6
LINK_CLASS = "doc-link"


def _shift_heading(token: Token) -> None:
    level = min(int(token.tag[1:]) + 1, MAX_HEADING_LEVEL)
    token.tag = f"h{level}"


def render_html(content: str | None) -> str | None:
    """Render markdown content to HTML.

    Frontmatter is dropped, headings get anchor ids and are demoted by one
    level. Returns None if content is None or empty.
    """
    if not content:
        return None

    _, body = split_frontmatter(content)
    env: dict = {}
    tokens = _md.parse(body, env)
    annotate_headings(tokens)
    for token in tokens:
        if token.type in {"heading_open", "heading_close"}:
            _shift_heading(token)
        elif token.type == "inline" and token.children:
            for child in token.children:
                if child.type == "link_open":
                    child.attrSet("class", LINK_CLASS)
    return _md.renderer.render(tokens, _md.options, env).strip()
