"""Interpretation of Nix type signatures into search filter tags.

Signatures follow the informal notation used in nixpkgs doc comments::

    concatMap :: (a -> [b]) -> [a] -> [b]

Every top-level argument and the final return type is reduced to a coarse tag
(``list``, ``attrset``, ``string``, ``lambda`` ...) that the search index uses
as ``from:<tag>`` and ``to:<tag>`` filters.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from noogle.core.types import TypeSignature

if TYPE_CHECKING:
    from noogle.core.types import Doc

_NAME_PREFIX = re.compile(r"^\s*[\w'.-]+\s*::\s*")
_TYPE_HEADING = re.compile(r"^#{1,6}[ \t]+Type[ \t]*:?[ \t]*$", re.MULTILINE | re.IGNORECASE)
_FENCED_BLOCK = re.compile(r"^[ \t]*(```|~~~)[^\n]*\n(.*?)^[ \t]*\1", re.MULTILINE | re.DOTALL)

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = {")", "]", "}"}

_TAG_ALIASES = {
    "string": "string",
    "str": "string",
    "int": "int",
    "integer": "int",
    "number": "number",
    "float": "float",
    "bool": "bool",
    "boolean": "bool",
    "path": "path",
    "null": "null",
    "attrset": "attrset",
    "attrs": "attrset",
    "set": "attrset",
    "list": "list",
    "derivation": "derivation",
    "function": "lambda",
    "lambda": "lambda",
    "any": "any",
}


def _split_top_level(signature: str) -> list[str]:
    """Split on ``->`` that is not nested inside brackets."""
    parts: list[str] = []
    depth = 0
    start = 0
    i = 0
    while i < len(signature):
        char = signature[i]
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(depth - 1, 0)
        elif depth == 0 and signature.startswith("->", i):
            parts.append(signature[start:i])
            start = i + 2
            i += 1
        i += 1
    parts.append(signature[start:])
    return [part.strip() for part in parts]


def _is_wrapped(text: str) -> bool:
    """Whether the opening parenthesis at index 0 closes at the very end."""
    if not (text.startswith("(") and text.endswith(")")):
        return False
    depth = 0
    for index, char in enumerate(text):
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth -= 1
            if depth == 0 and index != len(text) - 1:
                return False
    return True


def type_tag(component: str) -> str:
    """Reduce a single type expression to its filter tag."""
    text = component.strip()
    while _is_wrapped(text):
        inner = text[1:-1].strip()
        if len(_split_top_level(inner)) > 1:
            return "lambda"
        text = inner
    if not text:
        return "any"
    if text.startswith("["):
        return "list"
    if text.startswith("{"):
        return "attrset"

    word = text.split()[0]
    if len(word) == 1 and word.islower():
        # type variable
        return "any"
    return _TAG_ALIASES.get(word.lower(), word.lower())


def _main_signature(signature: str) -> str:
    """Join a multi-line signature, stopping at a second ``name :: ...`` definition."""
    lines = [line.strip() for line in signature.strip().splitlines()]
    if not lines:
        return ""
    kept = [lines[0]]
    for line in lines[1:]:
        if "::" in line and not line.startswith("{"):
            break
        kept.append(line)
    return " ".join(kept)


def interpret_type(name: str | None, signature: str) -> TypeSignature:
    """Derive argument and return tags from a signature string.

    ``name`` is the identifier the signature documents; a leading
    ``<name> ::`` is dropped before interpretation. An empty or malformed
    signature yields empty tag lists.
    """
    text = _main_signature(signature)
    if not text:
        return TypeSignature()

    if name and text.startswith(name):
        text = re.sub(rf"^{re.escape(name)}\s*::\s*", "", text)
    text = _NAME_PREFIX.sub("", text)

    components = _split_top_level(text)
    if any(not component for component in components):
        return TypeSignature()

    tags = [type_tag(component) for component in components]
    return TypeSignature(args=tags[:-1], returns=tags[-1:])


def find_type(doc: Doc) -> str | None:
    """Find a signature in the body of ``doc`` when the metadata has none.

    Looks for the first fenced code block below a ``Type`` heading, then for a
    line of the form ``<name> :: ...``.
    """
    body = doc.body
    if not body:
        return None

    heading = _TYPE_HEADING.search(body)
    if heading is not None:
        block = _FENCED_BLOCK.search(body, heading.end())
        if block is not None and block.group(2).strip():
            return block.group(2).strip()

    if doc.name:
        line = re.search(rf"^[ \t]*{re.escape(doc.name)}[ \t]*::.*$", body, re.MULTILINE)
        if line is not None:
            return line.group(0).strip()
    return None
