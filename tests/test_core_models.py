from dataclasses import FrozenInstanceError

import pytest

from extractor.patterns.base import Category, HtmlElementMatch, PatternMatch
from extractor.patterns.table import PATTERN_SOURCES, anchor, build_pattern_table
from extractor.utils.errors import ExtractorError, UnsupportedCategoryError


def test_pattern_match_fields_and_length() -> None:
    match = PatternMatch(category=Category.EMAIL, start=3, end=9, text="x@y.io")
    assert match.length == 6


def test_pattern_match_immutable() -> None:
    match = PatternMatch(Category.HASHTAG, 0, 2, "#a")
    with pytest.raises(FrozenInstanceError):
        match.start = 1  # type: ignore[misc]


@pytest.mark.parametrize("start,end,text", [(-1, 2, "abc"), (5, 4, ""), (0, 2, "abc")])
def test_pattern_match_validation(start: int, end: int, text: str) -> None:
    with pytest.raises(ValueError):
        PatternMatch(Category.HASHTAG, start, end, text)


def test_html_element_match_equality() -> None:
    assert HtmlElementMatch("<b>x</b>", "b", "x") == HtmlElementMatch(
        full_match="<b>x</b>", tag_name="b", content="x"
    )


def test_category_parse() -> None:
    assert Category.parse("htmlElement") is Category.HTML_ELEMENT
    assert Category.parse(Category.URL) is Category.URL
    with pytest.raises(UnsupportedCategoryError) as excinfo:
        Category.parse("zip", "validation")
    assert str(excinfo.value) == "Unsupported validation type: 'zip'"
    assert isinstance(excinfo.value, ExtractorError)


def test_table_has_one_definition_per_category() -> None:
    table = build_pattern_table()
    assert list(table) == list(Category)
    assert set(PATTERN_SOURCES) == set(Category)
    structured = [c for c, d in table.items() if d.structured]
    assert structured == [Category.HTML_ELEMENT]


def test_anchored_variant_wraps_source() -> None:
    table = build_pattern_table()
    for category, definition in table.items():
        assert definition.source == PATTERN_SOURCES[category]
        assert definition.scanner.pattern == definition.source
        assert definition.anchored.pattern == anchor(definition.source)


def test_definitions_are_frozen() -> None:
    definition = build_pattern_table()[Category.EMAIL]
    with pytest.raises(FrozenInstanceError):
        definition.source = ".*"  # type: ignore[misc]
