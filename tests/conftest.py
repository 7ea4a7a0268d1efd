from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from noogle.core.config import NoogleConfig, PathsSettings, SourceSettings
from noogle.core.types import Doc

CONCAT_BODY = """# Type

```
concat :: [a] -> [a] -> [a]
```

# Examples

Concatenates two lists.
"""


def make_doc(path: list[str], content: str | None = None, **meta: Any) -> Doc:
    """Build an entry the way it appears in the JSON corpus."""
    raw: dict[str, Any] = {"meta": {"title": ".".join(path), "path": path, **meta}}
    if content is not None:
        raw["content"] = {"content": content}
    return Doc.model_validate(raw)


@pytest.fixture
def concat_doc() -> Doc:
    return make_doc(
        ["lib", "lists", "concat"],
        CONCAT_BODY,
        aliases=[["lib", "concat"]],
        count_applied=0,
        attr_position={"file": "/tmp/build/nixpkgs/src/lib/lists.nix", "line": 12, "column": 3},
    )


@pytest.fixture
def corpus(concat_doc: Doc) -> list[Doc]:
    return [
        concat_doc,
        make_doc(
            ["builtins", "map"],
            "Apply a function to each element.\n",
            is_primop=True,
            count_applied=0,
            primop_meta={"name": "map", "args": ["f", "list"], "arity": 2},
            signature="map :: (a -> b) -> [a] -> [b]",
        ),
        make_doc(["lib", "empty"]),
    ]


@pytest.fixture
def config(tmp_path: Path) -> NoogleConfig:
    return NoogleConfig(
        source=SourceSettings(base_url="https://x/y"),
        paths=PathsSettings(site_root=tmp_path),
    )


@pytest.fixture
def doc_factory():
    return make_doc
