"""Line-layout analysis of documentation comments."""

from .line_model import LineModelBuilder, build_lines
from .model import DocNode, FileReport, LogicalLine, NodeKind, Violation, ViolationKind
from .trailing_space import (
    TrailingSpaceCheck,
    check_comment,
    render_lint_line,
    render_report_lines,
)
from .width_evaluator import evaluate_lines

__all__ = [
    "DocNode",
    "FileReport",
    "LineModelBuilder",
    "LogicalLine",
    "NodeKind",
    "TrailingSpaceCheck",
    "Violation",
    "ViolationKind",
    "build_lines",
    "check_comment",
    "evaluate_lines",
    "render_lint_line",
    "render_report_lines",
]
