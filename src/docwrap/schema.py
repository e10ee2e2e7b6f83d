from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from docwrap.analysis.model import DocNode, FileReport, NodeKind, Violation


class DocNodeDTO(BaseModel):
    kind: str
    line: int = Field(ge=1)
    column: int = Field(ge=0)
    text: str = ""
    children: List[DocNodeDTO] = []

    def to_node(self) -> DocNode:
        return DocNode(
            kind=NodeKind.parse(self.kind),
            line=self.line,
            column=self.column,
            text=self.text,
            children=tuple(child.to_node() for child in self.children),
        )


class CommentFileDTO(BaseModel):
    path: str
    comments: List[DocNodeDTO] = []


class ViolationDTO(BaseModel):
    kind: str
    line: int
    limit: int
    length: Optional[int] = None
    message: str

    @classmethod
    def from_violation(cls, violation: Violation) -> ViolationDTO:
        return cls(
            kind=violation.kind.value,
            line=violation.line_number,
            limit=violation.limit,
            length=violation.length,
            message=violation.message(),
        )


class FileReportDTO(BaseModel):
    path: str
    violations: List[ViolationDTO] = []

    @classmethod
    def from_report(cls, report: FileReport) -> FileReportDTO:
        return cls(
            path=report.path,
            violations=[ViolationDTO.from_violation(item) for item in report.violations],
        )


class CheckResponse(BaseModel):
    line_limit: int
    reports: List[FileReportDTO] = []
    errors: List[str] = []


class LintEntryDTO(BaseModel):
    path: str
    line: int
    col: int
    code: str
    message: str
    severity: str = "warning"

    @classmethod
    def from_violation(cls, path: str, violation: Violation) -> LintEntryDTO:
        return cls(
            path=path,
            line=violation.line_number,
            col=1,
            code=violation.kind.lint_code,
            message=violation.message(),
        )
