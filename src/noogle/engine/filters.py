"""Custom Jinja2 filters for entry pages."""

from collections.abc import Sequence

from noogle.core.resolver import join_path


def dotted(path: Sequence[str]) -> str:
    """Display form of a path: ``["lib", "foo"]`` -> ``lib.foo``."""
    return join_path(path)


def route(path: Sequence[str], prefix: str = "/f") -> str:
    """Site URL of an entry page: ``["lib", "foo"]`` -> ``/f/lib/foo``."""
    return f"{prefix.rstrip('/')}/{'/'.join(path)}"


def toc_indent(level: int) -> int:
    """Left padding of a table of contents row, in spacing units."""
    return (level - 1) * 2 + 1
