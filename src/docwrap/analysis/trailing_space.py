"""Trailing-space utilization check for documentation comments.

Flags lines that wrap before the configured limit although the next line's
first word would still fit, and lines that run past the limit unless they
open with an element that cannot be broken (a tag, an inline reference, or
a URL).
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from docwrap.analysis.line_model import LineModelBuilder
from docwrap.analysis.model import DocNode, FileReport, Violation
from docwrap.analysis.width_evaluator import evaluate_lines
from docwrap.config import DEFAULT_LINE_LIMIT, validate_line_limit

logger = logging.getLogger(__name__)


class TrailingSpaceCheck:
    """Run the line-model builder and width evaluator per comment.

    An instance may be reused for any number of comments, one at a time; the
    builder is reset at the start of each comment.
    """

    def __init__(self, line_limit: int = DEFAULT_LINE_LIMIT) -> None:
        self.line_limit = validate_line_limit(line_limit)
        self._builder = LineModelBuilder()

    def check_comment(self, root: DocNode) -> Tuple[Violation, ...]:
        lines = self._builder.build(root)
        violations = tuple(evaluate_lines(lines, self.line_limit))
        if violations:
            logger.debug(
                "comment at line %d: %d violation(s)", root.line, len(violations)
            )
        return violations

    def check_comments(self, roots: Iterable[DocNode]) -> Tuple[Violation, ...]:
        violations: List[Violation] = []
        for root in roots:
            violations.extend(self.check_comment(root))
        return tuple(violations)

    def check_file(self, path: str, roots: Iterable[DocNode]) -> FileReport:
        return FileReport(path=path, violations=self.check_comments(roots))


def check_comment(root: DocNode, line_limit: int = DEFAULT_LINE_LIMIT) -> Tuple[Violation, ...]:
    return TrailingSpaceCheck(line_limit).check_comment(root)


def render_lint_line(path: str, violation: Violation) -> str:
    return (
        f"{path}:{violation.line_number}:1: "
        f"{violation.kind.lint_code} {violation.message()}"
    )


def render_report_lines(reports: Iterable[FileReport]) -> List[str]:
    return [
        render_lint_line(report.path, violation)
        for report in reports
        for violation in report.violations
    ]
