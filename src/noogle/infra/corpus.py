"""Loading of the documentation corpus."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from noogle.core.exceptions import CorpusLoadError
from noogle.core.types import Doc

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_corpus_adapter = TypeAdapter(list[Doc])


def parse_corpus(raw: object, origin: str = "<memory>") -> list[Doc]:
    """Validate already decoded JSON into entries, keeping corpus order."""
    try:
        return _corpus_adapter.validate_python(raw)
    except ValidationError as e:
        raise CorpusLoadError(origin, str(e)) from e


def load_corpus(path: Path) -> list[Doc]:
    """Read the JSON corpus (a list of entries) from ``path``.

    Raises:
        CorpusLoadError: If the file cannot be read, decoded or validated.

    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CorpusLoadError(str(path), str(e)) from e

    docs = parse_corpus(raw, str(path))
    logger.info("Loaded %d entries from %s", len(docs), path)
    return docs
