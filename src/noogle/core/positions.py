"""Selection of the source position shown on an entry page.

An entry may carry up to three positions. The most specific one wins:

1. the position of the doc comment (``content_meta.position``)
2. the position of the attribute definition (``attr_position``)
3. the position of the lambda (``lambda_position``)

The lambda position only identifies the entry itself when no arguments have
been applied yet (``count_applied == 0``); partially applied functions share
the lambda of the function they were derived from.
"""

from dataclasses import dataclass
from enum import Enum

from noogle.core.types import DocMeta, FilePosition


class PositionOrigin(str, Enum):
    CONTENT = "content"
    ATTRIBUTE = "attribute"
    LAMBDA = "lambda"


@dataclass(frozen=True, slots=True)
class Found:
    position: FilePosition
    origin: PositionOrigin


@dataclass(frozen=True, slots=True)
class NotFound:
    pass


PositionResult = Found | NotFound

NOT_FOUND = NotFound()


def _content_position(meta: DocMeta) -> FilePosition | None:
    if meta.content_meta is None:
        return None
    return meta.content_meta.position


def select_position(meta: DocMeta | None) -> PositionResult:
    """Return the canonical position of an entry."""
    if meta is None:
        return NOT_FOUND
    if (position := _content_position(meta)) is not None:
        return Found(position, PositionOrigin.CONTENT)
    if meta.attr_position is not None:
        return Found(meta.attr_position, PositionOrigin.ATTRIBUTE)
    if meta.count_applied == 0 and meta.lambda_position is not None:
        return Found(meta.lambda_position, PositionOrigin.LAMBDA)
    return NOT_FOUND


def select_raw_position(meta: DocMeta | None) -> PositionResult:
    """Like :func:`select_position`, but accept the lambda of applied functions.

    Used to offer a best-effort link when no canonical position exists.
    """
    if meta is None:
        return NOT_FOUND
    if (position := _content_position(meta)) is not None:
        return Found(position, PositionOrigin.CONTENT)
    if meta.attr_position is not None:
        return Found(meta.attr_position, PositionOrigin.ATTRIBUTE)
    if meta.lambda_position is not None:
        return Found(meta.lambda_position, PositionOrigin.LAMBDA)
    return NOT_FOUND


def relative_file(file: str, strip_components: int = 4, repo_root: str | None = None) -> str:
    """Turn a recorded file path into a path relative to the repository root.

    ``repo_root`` is removed when the file lives under it. Otherwise the first
    ``strip_components`` segments are dropped, so ``/a/b/c/d/e/f.nix`` becomes
    ``e/f.nix``.
    """
    if repo_root:
        prefix = repo_root.rstrip("/") + "/"
        if file.startswith(prefix):
            return file[len(prefix) :]
    segments = file.lstrip("/").split("/")
    return "/".join(segments[strip_components:])


def source_url(
    base_url: str,
    position: FilePosition | None,
    strip_components: int = 4,
    repo_root: str | None = None,
) -> str:
    """Build a browsable link to ``position`` below ``base_url``.

    The ``#L<line>:C<column>`` fragment is only added when the relative file,
    line and column are all known and non-zero. Otherwise the link points at
    ``base_url`` alone.
    """
    if position is None:
        return base_url
    filename = relative_file(position.file, strip_components, repo_root)
    if filename and position.line and position.column:
        return f"{base_url}/{filename}#L{position.line}:C{position.column}"
    return base_url
