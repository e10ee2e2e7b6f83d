from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Optional, Tuple


class NodeKind(StrEnum):
    LINE_BREAK = "line_break"
    LEADING_DECORATION = "leading_decoration"
    TEXT = "text"
    TAG_NAME = "tag_name"
    PARAMETER_NAME = "parameter_name"
    INLINE_REFERENCE = "inline_reference"
    HTML_ELEMENT = "html_element"
    HTML_TAG_START = "html_tag_start"
    HTML_TAG_END = "html_tag_end"
    BLOCK_TAG = "block_tag"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> NodeKind:
        # Unrecognized kinds are transparent composites.
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class DocNode:
    kind: NodeKind
    line: int
    column: int
    text: str = ""
    children: Tuple[DocNode, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass
class LogicalLine:
    line_number: int
    length: int = 0
    has_content: bool = False
    should_be_checked: bool = True
    starts_with_unbreakable: bool = False
    has_content_after_unbreakable: bool = False
    first_word: Optional[str] = None
    is_block_tag_start: bool = False

    def extend_to(self, end_column: int) -> None:
        if end_column > self.length:
            self.length = end_column

    def offer_first_word(self, word: Optional[str]) -> None:
        if self.first_word is None and word:
            self.first_word = word


class ViolationKind(StrEnum):
    TOO_LONG = "too_long"
    TOO_SHORT = "too_short"

    @property
    def lint_code(self) -> str:
        return f"DOCWRAP_{self.name}"


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    line_number: int
    limit: int
    length: Optional[int] = None

    def message(self) -> str:
        if self.kind is ViolationKind.TOO_LONG:
            return f"Line is longer than {self.limit} characters (found {self.length})."
        return (
            "Line is shorter than necessary; content from the next line fits "
            f"within {self.limit} characters."
        )


@dataclass(frozen=True)
class FileReport:
    path: str
    violations: Tuple[Violation, ...] = field(default_factory=tuple)
