"""Load serialized comment trees produced by an external parser."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from pydantic import ValidationError

from docwrap.analysis.model import DocNode
from docwrap.exceptions import PayloadError
from docwrap.schema import CommentFileDTO

logger = logging.getLogger(__name__)

TREE_SUFFIX = ".json"


@dataclass(frozen=True)
class ParseFailureWitness:
    path: Path
    stage: str
    error: str

    def render(self) -> str:
        return f"{self.path}: {self.stage} failed: {self.error}"


@dataclass(frozen=True)
class CommentFileUnit:
    path: str
    source: Path
    comments: tuple[DocNode, ...]


@dataclass(frozen=True)
class TreeIngestBundle:
    units: tuple[CommentFileUnit, ...]
    failures: tuple[ParseFailureWitness, ...] = ()


def iter_tree_paths(
    paths: Iterable[str | Path],
    *,
    exclude_dirs: Sequence[str] = (),
) -> list[Path]:
    """Expand input paths to tree payload files, pruning excluded directories."""
    out: list[Path] = []
    for p in paths:
        path = Path(p)
        if path.is_dir():
            for root, dirnames, filenames in os.walk(path, topdown=True):
                dirnames[:] = sorted(d for d in dirnames if d not in exclude_dirs)
                for filename in sorted(filenames):
                    if filename.endswith(TREE_SUFFIX):
                        out.append(Path(root) / filename)
        else:
            out.append(path)
    return sorted(out)


def load_tree_payload(path: Path) -> list[CommentFileDTO]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PayloadError(str(exc), stage="read", path=path) from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PayloadError(str(exc), stage="decode", path=path) from exc
    items = data if isinstance(data, list) else [data]
    try:
        return [CommentFileDTO.model_validate(item) for item in items]
    except ValidationError as exc:
        raise PayloadError(str(exc), stage="schema", path=path) from exc


def ingest_tree_file(path: Path) -> list[CommentFileUnit]:
    units: list[CommentFileUnit] = []
    for entry in load_tree_payload(path):
        units.append(
            CommentFileUnit(
                path=entry.path,
                source=path,
                comments=tuple(comment.to_node() for comment in entry.comments),
            )
        )
    logger.debug("ingested %d file payload(s) from %s", len(units), path)
    return units


def ingest_paths(
    paths: Iterable[str | Path],
    *,
    exclude_dirs: Sequence[str] = (),
) -> TreeIngestBundle:
    units: list[CommentFileUnit] = []
    failures: list[ParseFailureWitness] = []
    for path in iter_tree_paths(paths, exclude_dirs=exclude_dirs):
        try:
            units.extend(ingest_tree_file(path))
        except PayloadError as exc:
            failures.append(ParseFailureWitness(path=path, stage=exc.stage, error=str(exc)))
            logger.warning("skipping %s: %s failed", path, exc.stage)
    return TreeIngestBundle(units=tuple(units), failures=tuple(failures))
