"""Markdown description of built-in primitive operations (primops)."""

from noogle.core.types import PrimopMeta


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def primop_description(meta: PrimopMeta) -> str:
    """Render the generated preamble shown above a primop's documentation.

    The block always ends with a blank line so the documentation body can be
    appended directly.
    """
    lines = ["> **Primop**"]
    if meta.name:
        lines.append(f"> `builtins.{meta.name}`")

    arity = meta.arity if meta.arity is not None else len(meta.args)
    if arity:
        args = ", ".join(f"`{arg}`" for arg in meta.args)
        takes = f"> Takes **{_plural(arity, 'argument')}**"
        lines.append(f"{takes}: {args}" if args else takes)
    else:
        lines.append("> Takes no arguments")

    if meta.experimental:
        lines.append("> ")
        lines.append("> This primop is **experimental** and may change or be removed.")

    # Two trailing spaces are markdown hard breaks inside the blockquote.
    return "  \n".join(lines) + "\n\n"
