"""Logical-line model for one documentation comment.

The builder walks a comment tree once, in document order, and folds every
node into the line it sits on. Only one line is open at a time; it is pushed
onto ``lines`` when a line break arrives, when a node on a different source
line shows up, or when the walk ends. Lines that never gained any width are
dropped at that point.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from docwrap.analysis.model import DocNode, LogicalLine, NodeKind
from docwrap.analysis.node_text import (
    first_word,
    full_text,
    html_tag_name,
    is_pre_tag,
    is_structural_tag,
    starts_with_url,
    trim,
    visible_text,
)

logger = logging.getLogger(__name__)


class LineModelBuilder:
    def __init__(self) -> None:
        self.lines: List[LogicalLine] = []
        self.current_line: Optional[LogicalLine] = None
        self.inside_pre_block = False

    def reset(self) -> None:
        self.lines = []
        self.current_line = None
        self.inside_pre_block = False

    def build(self, root: DocNode) -> Tuple[LogicalLine, ...]:
        """Populate the line model for ``root`` and return the finished lines.

        All state from a previous comment is discarded first.
        """
        self.reset()
        self._process_children(root)
        self.finalize_line()
        logger.debug(
            "built %d logical line(s) for comment at line %d",
            len(self.lines),
            root.line,
        )
        return tuple(self.lines)

    # Line cursor.

    def ensure_line(self, line_number: int) -> LogicalLine:
        current = self.current_line
        if current is not None and current.line_number == line_number:
            return current
        self.finalize_line()
        current = LogicalLine(line_number=line_number)
        current.should_be_checked = not self.inside_pre_block
        self.current_line = current
        return current

    def finalize_line(self) -> None:
        current = self.current_line
        if current is not None and current.length > 0:
            self.lines.append(current)
        self.current_line = None

    # Dispatch.

    def _process_children(self, node: DocNode) -> None:
        for child in node.children:
            self._process_node(child)

    def _process_node(self, node: DocNode) -> None:
        kind = node.kind
        if kind is NodeKind.LINE_BREAK:
            self.finalize_line()
        elif kind is NodeKind.LEADING_DECORATION:
            return
        elif kind is NodeKind.TEXT:
            self._process_text(node)
        elif kind in (NodeKind.TAG_NAME, NodeKind.PARAMETER_NAME):
            self._process_tag_content(node)
        elif kind is NodeKind.INLINE_REFERENCE:
            self._process_inline_reference(node)
        elif kind is NodeKind.HTML_ELEMENT:
            self._process_html_element(node)
        elif kind is NodeKind.BLOCK_TAG:
            self._process_block_tag(node)
        else:
            self._process_children(node)

    def _process_block_tag(self, node: DocNode) -> None:
        self.finalize_line()
        self.ensure_line(node.line).is_block_tag_start = True
        self._process_children(node)
        # Applies to the line still open after the tag; a trailing line break
        # inside the tag leaves none.
        current = self.current_line
        if current is not None and not current.has_content_after_unbreakable:
            current.should_be_checked = False

    def _process_tag_content(self, node: DocNode) -> None:
        line = self.ensure_line(node.line)
        line.extend_to(node.column + len(node.text))
        if not line.has_content:
            line.has_content = True
            line.starts_with_unbreakable = True

    def _process_text(self, node: DocNode) -> None:
        text = node.text
        line = self.ensure_line(node.line)
        trimmed = trim(text)
        if not trimmed:
            if text:
                line.extend_to(node.column + len(text))
            return
        line.extend_to(node.column + len(text))
        if not line.has_content:
            line.has_content = True
            if starts_with_url(trimmed):
                line.starts_with_unbreakable = True
                line.offer_first_word(trimmed)
            else:
                line.offer_first_word(first_word(trimmed))
            return
        if line.starts_with_unbreakable:
            line.has_content_after_unbreakable = True
        line.offer_first_word(first_word(trimmed))

    def _process_inline_reference(self, node: DocNode) -> None:
        line = self.ensure_line(node.line)
        tag_text = full_text(node)
        line.extend_to(node.column + len(tag_text))
        if not line.has_content:
            line.starts_with_unbreakable = True
            line.offer_first_word(tag_text)
        else:
            line.has_content_after_unbreakable = True
        line.has_content = True

    def _process_html_element(self, node: DocNode) -> None:
        tag_name = html_tag_name(node)
        # One flip per element node; opening and closing tags are separate nodes.
        if is_pre_tag(tag_name):
            self.inside_pre_block = not self.inside_pre_block
        line = self.ensure_line(node.line)
        structural = is_structural_tag(tag_name)
        if not line.has_content and structural:
            line.should_be_checked = False
        shown = visible_text(node)
        if not shown:
            return
        line.extend_to(node.column + len(full_text(node)))
        if not structural:
            line.has_content = True
            line.offer_first_word(first_word(trim(shown)))


def build_lines(root: DocNode) -> Tuple[LogicalLine, ...]:
    return LineModelBuilder().build(root)
