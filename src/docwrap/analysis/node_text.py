"""Text extraction helpers over documentation-comment trees."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from docwrap.analysis.model import DocNode, NodeKind

URL_PATTERN = re.compile(r"https?://|ftp://")

STRUCTURAL_TAGS = frozenset(
    {
        "p",
        "div",
        "ul",
        "ol",
        "li",
        "pre",
        "table",
        "tr",
        "td",
        "th",
        "blockquote",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
    }
)

# Space and C0 controls only; other Unicode spaces count as content.
_TRIM_CHARS = "".join(map(chr, range(33)))
_WHITESPACE_RE = re.compile(r"\s+", re.ASCII)


def iter_leaves(node: DocNode) -> Iterable[DocNode]:
    if node.is_leaf:
        yield node
        return
    for child in node.children:
        yield from iter_leaves(child)


def full_text(node: DocNode) -> str:
    """Rendered text of a node: every leaf, markup included."""
    return "".join(leaf.text for leaf in iter_leaves(node))


def visible_text(node: DocNode) -> str:
    """Concatenate only the text nodes under ``node``, skipping tag markup."""
    if node.kind is NodeKind.TEXT:
        return node.text
    return "".join(visible_text(child) for child in node.children)


def trim(text: str) -> str:
    return text.strip(_TRIM_CHARS)


def first_word(trimmed: str) -> Optional[str]:
    words = _WHITESPACE_RE.split(trimmed, maxsplit=1)
    if words and words[0]:
        return words[0]
    return None


def starts_with_url(trimmed: str) -> bool:
    return URL_PATTERN.match(trimmed) is not None


def html_tag_name(element: DocNode) -> str:
    for child in element.children:
        if child.kind not in (NodeKind.HTML_TAG_START, NodeKind.HTML_TAG_END):
            continue
        for tag_child in child.children:
            if tag_child.kind is NodeKind.TAG_NAME:
                return tag_child.text
    return ""


def is_structural_tag(tag_name: str) -> bool:
    return tag_name.lower() in STRUCTURAL_TAGS


def is_pre_tag(tag_name: str) -> bool:
    return tag_name.lower() == "pre"
