import logging

import pytest

from extractor import PatternRegistry, load_config


@pytest.fixture
def bounded() -> PatternRegistry:
    return PatternRegistry(load_config(env={"EXTRACTOR_MAX_INPUT_CHARS": "10"}))


def test_unbounded_by_default() -> None:
    reg = PatternRegistry(load_config(env={}))
    assert reg.max_input_chars is None
    text = " ".join(f"#t{i}" for i in range(50))
    assert len(reg.extract("hashtag", text)) == 50


def test_extract_scans_leading_chars_only(
    bounded: PatternRegistry, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING, logger="extractor")
    assert bounded.extract("hashtag", "#a #b #c #d #e") == ["#a", "#b", "#c"]
    assert "truncated" in caplog.text


def test_iter_matches_and_extract_all_bounded(bounded: PatternRegistry) -> None:
    spans = list(bounded.iter_matches("hashtag", "#a #b #c #d #e"))
    assert [s.text for s in spans] == ["#a", "#b", "#c"]
    assert bounded.extract_all("#a #b #c #d #e", ["hashtag"]) == {"hashtag": ["#a", "#b", "#c"]}


def test_validate_rejects_over_long_input(
    bounded: PatternRegistry, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING, logger="extractor")
    assert bounded.validate("hashtag", "#" + "a" * 20) is False
    assert "exceeds validation limit" in caplog.text
    assert bounded.validate("hashtag", "#abc") is True


def test_match_cut_by_limit_is_dropped(bounded: PatternRegistry) -> None:
    text = "user@ab.com is the address"
    assert bounded.extract("email", text) == []
    assert list(bounded.iter_matches("email", text)) == []
    assert bounded.extract_all(text, ["email"]) == {"email": []}
    assert PatternRegistry().extract("email", text) == ["user@ab.com"]


def test_match_ending_before_limit_is_kept(bounded: PatternRegistry) -> None:
    assert bounded.extract("hashtag", "#abc #defghijk") == ["#abc"]
