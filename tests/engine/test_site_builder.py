import json
from pathlib import Path

from noogle.core.config import NoogleConfig
from noogle.core.types import Doc
from noogle.engine.site import SiteBuilder, index_corpus


def test_index_corpus_keeps_first_duplicate(doc_factory) -> None:
    first = doc_factory(["lib", "foo"], "first")
    second = doc_factory(["lib", "foo"], "second")

    assert index_corpus([first, second]) == {"lib.foo": first}


def test_render_pages_one_per_entry(config: NoogleConfig, corpus: list[Doc]) -> None:
    pages = list(SiteBuilder(config).render_pages(corpus))

    assert [page.path for page in pages] == [doc.meta.path for doc in corpus]
    assert pages[0].title == "lib.lists.concat"
    assert "<h1>lib.lists.concat</h1>" in pages[0].html


def test_build_writes_site(config: NoogleConfig, corpus: list[Doc]) -> None:
    written = SiteBuilder(config).build(corpus)

    out = config.paths.abs_output_dir
    assert written == len(corpus)
    assert (out / "index.html").is_file()
    assert "lib.lists.concat" in (out / "f" / "lib" / "lists" / "concat" / "index.html").read_text()
    assert (out / "f" / "lib" / "empty" / "index.html").is_file()


def test_build_loads_corpus_from_config(config: NoogleConfig, tmp_path: Path) -> None:
    data = [{"meta": {"title": "lib.id", "path": ["lib", "id"]}, "content": {"content": "Identity."}}]
    (tmp_path / "data.json").write_text(json.dumps(data))

    assert SiteBuilder(config).build() == 1
    assert "Identity." in (tmp_path / "dist" / "f" / "lib" / "id" / "index.html").read_text()
