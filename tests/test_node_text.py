from __future__ import annotations

import pytest

from docwrap.analysis import node_text
from docwrap.analysis.model import DocNode, NodeKind
from tests.doc_helpers import html, inline, text


def test_full_text_concatenates_every_leaf() -> None:
    node = inline(3, 10, "link", "java.util.List")
    assert node_text.full_text(node) == "{@link java.util.List}"


def test_full_text_of_leaf_is_its_text() -> None:
    assert node_text.full_text(text(1, 0, " hello ")) == " hello "


def test_visible_text_skips_tag_markup() -> None:
    element = html(2, 6, "b", body="bold words")
    assert node_text.visible_text(element) == "bold words"
    assert node_text.full_text(element) == "<b>bold words"


def test_visible_text_is_empty_for_bare_tag() -> None:
    assert node_text.visible_text(html(2, 6, "p")) == ""


@pytest.mark.parametrize(
    ("trimmed", "expected"),
    [
        ("alpha beta", "alpha"),
        ("alpha\tbeta", "alpha"),
        ("single", "single"),
        ("alpha\u00a0beta", "alpha\u00a0beta"),
        ("", None),
    ],
)
def test_first_word(trimmed: str, expected: str | None) -> None:
    assert node_text.first_word(trimmed) == expected


def test_trim_strips_only_space_and_control_characters() -> None:
    assert node_text.trim("\t  word \x0b\n") == "word"
    assert node_text.trim("\u00a0") == "\u00a0"
    assert node_text.trim("\u2003word\u2003") == "\u2003word\u2003"


@pytest.mark.parametrize(
    ("trimmed", "expected"),
    [
        ("http://example.com", True),
        ("https://example.com/a/b", True),
        ("ftp://files.example.com", True),
        ("see http://example.com", False),
        ("mailto:someone@example.com", False),
        ("HTTP://EXAMPLE.COM", False),
    ],
)
def test_starts_with_url(trimmed: str, expected: bool) -> None:
    assert node_text.starts_with_url(trimmed) is expected


def test_html_tag_name_reads_start_and_end_tags() -> None:
    assert node_text.html_tag_name(html(1, 0, "pre")) == "pre"
    assert node_text.html_tag_name(html(1, 0, "PRE", closing=True)) == "PRE"


def test_html_tag_name_missing_is_empty() -> None:
    element = DocNode(
        kind=NodeKind.HTML_ELEMENT,
        line=1,
        column=0,
        children=(text(1, 0, "stray"),),
    )
    assert node_text.html_tag_name(element) == ""


@pytest.mark.parametrize("tag", ["p", "DIV", "ul", "Li", "table", "th", "blockquote", "h1", "H6", "pre"])
def test_structural_tags(tag: str) -> None:
    assert node_text.is_structural_tag(tag)


@pytest.mark.parametrize("tag", ["b", "code", "a", "span", "h7", ""])
def test_inline_tags_are_not_structural(tag: str) -> None:
    assert not node_text.is_structural_tag(tag)


def test_is_pre_tag_ignores_case() -> None:
    assert node_text.is_pre_tag("Pre")
    assert not node_text.is_pre_tag("p")
