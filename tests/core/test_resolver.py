"""Tests for path resolution and static route parameters."""

from hypothesis import given
from hypothesis import strategies as st

from noogle.core.resolver import find_doc, join_path, static_params
from noogle.core.types import Doc

segments = st.lists(st.text(alphabet="abcdefgh", min_size=1, max_size=6), min_size=1, max_size=4)


def test_find_doc_returns_exact_match(corpus: list[Doc]) -> None:
    doc = find_doc(corpus, ["lib", "lists", "concat"])

    assert doc is not None
    assert doc.meta.title == "lib.lists.concat"


def test_find_doc_missing_path_returns_none(corpus: list[Doc]) -> None:
    assert find_doc(corpus, ["lib", "lists", "nope"]) is None


def test_find_doc_is_case_sensitive(corpus: list[Doc]) -> None:
    assert find_doc(corpus, ["lib", "Lists", "concat"]) is None


def test_find_doc_first_match_wins(doc_factory) -> None:
    first = doc_factory(["lib", "foo"], "first")
    second = doc_factory(["lib", "foo"], "second")

    assert find_doc([first, second], ["lib", "foo"]) is first


def test_find_doc_compares_joined_paths(doc_factory) -> None:
    """Segments are joined with '.', so differently split paths can collide."""
    doc = doc_factory(["lib", "a.b"])

    assert find_doc([doc], ["lib", "a", "b"]) is doc


def test_static_params_one_per_entry_in_order(corpus: list[Doc]) -> None:
    params = static_params(corpus)

    assert params == [{"path": doc.meta.path} for doc in corpus]
    assert params[0]["path"] is not corpus[0].meta.path


@given(paths=st.lists(segments, min_size=1, max_size=8, unique_by=join_path))
def test_every_corpus_path_resolves_to_its_entry(paths: list[list[str]]) -> None:
    docs = [Doc.model_validate({"meta": {"title": join_path(p), "path": p}}) for p in paths]

    for params in static_params(docs):
        doc = find_doc(docs, params["path"])
        assert doc is not None
        assert join_path(doc.meta.path) == join_path(params["path"])
