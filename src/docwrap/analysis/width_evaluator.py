from __future__ import annotations

from typing import List, Optional, Sequence

from docwrap.analysis.model import LogicalLine, Violation, ViolationKind
from docwrap.config import DEFAULT_LINE_LIMIT


def next_content_line(lines: Sequence[LogicalLine], index: int) -> Optional[LogicalLine]:
    for candidate in lines[index + 1 :]:
        if candidate.has_content:
            return candidate
    return None


def can_pull_from_next_line(
    lines: Sequence[LogicalLine], index: int, length: int, limit: int
) -> bool:
    """True when the next content line's first word would fit after ``length``.

    A following block tag always starts fresh, and a following line with no
    extractable word cannot be judged, so neither counts as pullable.
    """
    following = next_content_line(lines, index)
    if following is None or following.is_block_tag_start:
        return False
    if following.first_word is None:
        return False
    return length + 1 + len(following.first_word) <= limit


def evaluate_lines(
    lines: Sequence[LogicalLine], limit: int = DEFAULT_LINE_LIMIT
) -> List[Violation]:
    violations: List[Violation] = []
    for index, line in enumerate(lines):
        if not line.should_be_checked or not line.has_content:
            continue
        if line.length > limit:
            if not line.starts_with_unbreakable:
                violations.append(
                    Violation(
                        kind=ViolationKind.TOO_LONG,
                        line_number=line.line_number,
                        limit=limit,
                        length=line.length,
                    )
                )
        elif can_pull_from_next_line(lines, index, line.length, limit):
            violations.append(
                Violation(
                    kind=ViolationKind.TOO_SHORT,
                    line_number=line.line_number,
                    limit=limit,
                )
            )
    return violations
