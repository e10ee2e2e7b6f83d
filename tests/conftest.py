from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT, ROOT / "src"):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))


import pytest

from docwrap.analysis.trailing_space import TrailingSpaceCheck
from tests.doc_helpers import to_payload


@pytest.fixture
def trailing_space() -> TrailingSpaceCheck:
    return TrailingSpaceCheck()


@pytest.fixture
def write_tree_payload():
    def _write(path: Path, *, source: str, comments: list) -> Path:
        payload = {
            "path": source,
            "comments": [to_payload(comment) for comment in comments],
        }
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
        )
        return path

    return _write
