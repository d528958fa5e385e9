"""Tests for markup stripping and cell text helpers."""

from __future__ import annotations

import pytest

from roster_parser.text_utils import (
    extract_link_and_text,
    normalize_dashes,
    normalize_text,
    normalize_time_label,
    strip_markup,
    titleize,
)


def test_strip_markup_removes_style_and_table_tags() -> None:
    assert strip_markup("[TD][B][SIZE=4]Saturday[/SIZE][/B][/TD]") == "Saturday"
    assert strip_markup("[COLOR=#000000]  6/9/2025 [/COLOR]") == "6/9/2025"


def test_strip_markup_collapses_labeled_link_to_label() -> None:
    cell = '[URL="https://roster.example.com/profile/ami/"]Ami[/URL]'
    assert strip_markup(cell) == "Ami"


def test_strip_markup_leaves_unknown_tags_in_place() -> None:
    assert strip_markup("[SPOILER]Ami[/SPOILER]  [IMG]x.png[/IMG]") == "[SPOILER]Ami[/SPOILER] [IMG]x.png[/IMG]"


def test_strip_markup_handles_empty_text() -> None:
    assert strip_markup("") == ""


def test_extract_link_and_text_returns_link_target() -> None:
    text, url = extract_link_and_text('[B][URL="https://roster.example.com/p/hazel"]Hazel new[/URL][/B]')

    assert text == "Hazel new"
    assert url == "https://roster.example.com/p/hazel"


def test_extract_link_and_text_without_link() -> None:
    assert extract_link_and_text("[B]Hazel[/B]") == ("Hazel", None)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("10 am – 10 pm", "10 am - 10 pm"),
        ("10am—6pm", "10am - 6pm"),
        ("[SIZE=2]9 am   -  5 pm[/SIZE]", "9 am - 5 pm"),
        ("whenever", "whenever"),
    ],
)
def test_normalize_time_label(raw: str, expected: str) -> None:
    assert normalize_time_label(raw) == expected


def test_normalize_time_label_is_idempotent() -> None:
    once = normalize_time_label("10 am – 10 pm")
    assert normalize_time_label(once) == once


def test_small_helpers() -> None:
    assert normalize_text("  a \n b\t c ") == "a b c"
    assert normalize_dashes("8 pm − 2 am") == "8 pm - 2 am"
    assert titleize("new zealand") == "New Zealand"
    assert titleize("vietnamese-chinese") == "Vietnamese-Chinese"
