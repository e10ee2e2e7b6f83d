from __future__ import annotations

from pathlib import Path
from typing import List, Optional
import json
import logging
import sys

import typer

from docwrap.analysis.model import FileReport
from docwrap.analysis.trailing_space import TrailingSpaceCheck, render_report_lines
from docwrap.config import (
    DEFAULT_CONFIG_NAME,
    layout_defaults,
    layout_exclude_list,
    line_limit_from_section,
    merge_payload,
)
from docwrap.exceptions import ConfigError
from docwrap.ingest import ingest_paths
from docwrap.schema import CheckResponse, FileReportDTO, LintEntryDTO

app = typer.Typer(add_completion=False)

_STDOUT_ALIAS = "-"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
_EXIT_VIOLATIONS = 1
_EXIT_INGEST_FAILURES = 3


def _write_text_to_target(
    target: str | Path,
    payload: str,
    *,
    ensure_trailing_newline: bool = False,
) -> None:
    text = payload
    if ensure_trailing_newline and not text.endswith("\n"):
        text = text + "\n"
    if str(target) == _STDOUT_ALIAS:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    Path(target).write_text(text, encoding="utf-8")


def _lint_entries(reports: list[FileReport]) -> list[dict[str, object]]:
    return [
        LintEntryDTO.from_violation(report.path, violation).model_dump()
        for report in reports
        for violation in report.violations
    ]


def _write_lint_jsonl(target: str, entries: list[dict[str, object]]) -> None:
    payload = "\n".join(json.dumps(entry, sort_keys=True) for entry in entries)
    _write_text_to_target(
        target,
        payload,
        ensure_trailing_newline=bool(payload),
    )


def _write_lint_sarif(target: str, entries: list[dict[str, object]]) -> None:
    rules: dict[str, dict[str, object]] = {}
    results: list[dict[str, object]] = []
    for entry in entries:
        code = str(entry.get("code") or "DOCWRAP")
        message = str(entry.get("message") or "").strip()
        rules.setdefault(
            code,
            {
                "id": code,
                "name": code,
                "shortDescription": {"text": code},
            },
        )
        results.append(
            {
                "ruleId": code,
                "level": str(entry.get("severity") or "warning"),
                "message": {"text": message or code},
                "locations": [
                    {
                        "physicalLocation": {
                            "artifactLocation": {"uri": str(entry.get("path") or "")},
                            "region": {
                                "startLine": int(entry.get("line") or 1),
                                "startColumn": int(entry.get("col") or 1),
                            },
                        }
                    }
                ],
            }
        )
    sarif = {
        "$schema": "https://json.schemastore.org/sarif-2.1.0.json",
        "version": "2.1.0",
        "runs": [
            {
                "tool": {"driver": {"name": "docwrap", "rules": list(rules.values())}},
                "results": results,
            }
        ],
    }
    payload = json.dumps(sarif, indent=2, sort_keys=True)
    _write_text_to_target(target, payload, ensure_trailing_newline=True)


def _emit_lint_outputs(
    lint_lines: list[str],
    *,
    lint: bool,
    lint_jsonl: Optional[Path],
    lint_sarif: Optional[Path],
    lint_entries: list[dict[str, object]],
) -> None:
    if lint:
        for line in lint_lines:
            typer.echo(line)
    if lint_jsonl is not None:
        _write_lint_jsonl(str(lint_jsonl), lint_entries)
    if lint_sarif is not None:
        _write_lint_sarif(str(lint_sarif), lint_entries)


def _build_check(
    *,
    root: Path,
    config: Optional[Path],
    line_limit: Optional[int],
    exclude: Optional[List[str]],
) -> tuple[TrailingSpaceCheck, list[str]]:
    defaults = layout_defaults(root=root, config_path=config)
    merged = merge_payload({"line_limit": line_limit, "exclude": exclude or None}, defaults)
    try:
        check = TrailingSpaceCheck(line_limit_from_section(merged))
    except ConfigError as exc:
        if line_limit is not None:
            hint = "--line-limit"
        else:
            source = config if config is not None else root / DEFAULT_CONFIG_NAME
            hint = f"[layout] line_limit in {source}"
        raise typer.BadParameter(str(exc), param_hint=hint) from exc
    return check, layout_exclude_list(merged)


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level."),
) -> None:
    """Report documentation-comment lines that waste or overrun the line width."""
    level = log_level.strip().upper()
    if level not in _LOG_LEVELS:
        raise typer.BadParameter(
            f"expected one of {', '.join(_LOG_LEVELS)}", param_hint="--log-level"
        )
    logging.basicConfig(level=getattr(logging, level), format=_LOG_FORMAT)


@app.command()
def check(
    paths: List[Path] = typer.Argument(..., help="Comment tree files or directories."),
    root: Path = typer.Option(Path("."), "--root"),
    config: Optional[Path] = typer.Option(None, "--config"),
    line_limit: Optional[int] = typer.Option(None, "--line-limit"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude"),
    lint: bool = typer.Option(True, "--lint/--no-lint"),
    lint_jsonl: Optional[Path] = typer.Option(None, "--lint-jsonl"),
    lint_sarif: Optional[Path] = typer.Option(None, "--lint-sarif"),
    json_report: Optional[Path] = typer.Option(None, "--json-report"),
    fail_on_violations: bool = typer.Option(
        True, "--fail-on-violations/--no-fail-on-violations"
    ),
) -> None:
    """Check serialized documentation-comment trees for line-width defects."""
    trailing_space, exclude_dirs = _build_check(
        root=root,
        config=config,
        line_limit=line_limit,
        exclude=exclude,
    )
    bundle = ingest_paths(paths, exclude_dirs=exclude_dirs)
    reports = [
        trailing_space.check_file(unit.path, unit.comments) for unit in bundle.units
    ]
    _emit_lint_outputs(
        render_report_lines(reports),
        lint=lint,
        lint_jsonl=lint_jsonl,
        lint_sarif=lint_sarif,
        lint_entries=_lint_entries(reports),
    )
    if json_report is not None:
        response = CheckResponse(
            line_limit=trailing_space.line_limit,
            reports=[FileReportDTO.from_report(report) for report in reports],
            errors=[failure.render() for failure in bundle.failures],
        )
        _write_text_to_target(
            json_report,
            response.model_dump_json(indent=2),
            ensure_trailing_newline=True,
        )
    for failure in bundle.failures:
        typer.echo(failure.render(), err=True)
    if bundle.failures:
        raise typer.Exit(code=_EXIT_INGEST_FAILURES)
    if fail_on_violations and any(report.violations for report in reports):
        raise typer.Exit(code=_EXIT_VIOLATIONS)
