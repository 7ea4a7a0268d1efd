import pytest

from noogle.engine.filters import dotted, route, toc_indent


def test_dotted() -> None:
    assert dotted(["lib", "strings", "concat"]) == "lib.strings.concat"


@pytest.mark.parametrize(
    ("prefix", "expected"),
    [("/f", "/f/lib/foo"), ("/f/", "/f/lib/foo"), ("/docs", "/docs/lib/foo")],
)
def test_route(prefix: str, expected: str) -> None:
    assert route(["lib", "foo"], prefix) == expected


@pytest.mark.parametrize(("level", "indent"), [(1, 1), (2, 3), (3, 5), (6, 11)])
def test_toc_indent(level: int, indent: int) -> None:
    assert toc_indent(level) == indent
