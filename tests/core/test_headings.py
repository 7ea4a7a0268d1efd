from noogle.core.headings import Slugger, extract_headings
from noogle.core.types import Heading


def test_extract_headings_levels_and_ids() -> None:
    markdown = "# Type\n\ntext\n\n## Example usage\n\n### `foo` and bar!\n"

    assert extract_headings(markdown) == [
        Heading(level=1, value="Type", id="type"),
        Heading(level=2, value="Example usage", id="example-usage"),
        Heading(level=3, value="foo and bar!", id="foo-and-bar"),
    ]


def test_extract_headings_skips_frontmatter() -> None:
    markdown = "---\ntitle: concat\n---\n# Examples\n"

    assert [h.value for h in extract_headings(markdown)] == ["Examples"]


def test_extract_headings_ignores_code_blocks() -> None:
    markdown = "```\n# not a heading\n```\n"

    assert extract_headings(markdown) == []


def test_extract_headings_empty() -> None:
    assert extract_headings("") == []


def test_slugger_deduplicates() -> None:
    slugger = Slugger()

    assert [slugger.slug("Example") for _ in range(3)] == ["example", "example-1", "example-2"]


def test_slugger_transliterates_unicode() -> None:
    assert Slugger().slug("Café à Paris") == "cafe-a-paris"


def test_extract_headings_ids_match_mkdocs_slugs() -> None:
    headings = extract_headings("## `lib.strings.concat` (deprecated)\n")

    assert headings[0].id == "libstringsconcat-deprecated"
