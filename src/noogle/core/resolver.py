"""Lookup of documentation entries by their path segments."""

from collections.abc import Iterable, Sequence

from noogle.core.types import Doc

PATH_SEPARATOR = "."


def join_path(path: Sequence[str], separator: str = PATH_SEPARATOR) -> str:
    """Join path segments into their display form, e.g. ``lib.strings.concat``."""
    return separator.join(path)


def find_doc(corpus: Iterable[Doc], path: Sequence[str]) -> Doc | None:
    """Return the first entry whose joined path equals the joined request path.

    Matching is exact: no case folding and no partial matches. A miss returns
    ``None`` so callers can render the empty state.
    """
    wanted = join_path(path)
    for doc in corpus:
        if join_path(doc.meta.path) == wanted:
            return doc
    return None


def static_params(corpus: Iterable[Doc]) -> list[dict[str, list[str]]]:
    """Enumerate the route parameters of every entry page.

    The ``path`` key matches the catch-all route segment of ``/f/<path...>``.
    """
    return [{"path": list(doc.meta.path)} for doc in corpus]
