"""Filesystem operations for article discovery and index output.

Pure parsing utilities live in :mod:`artindex.domain.content` (correct
dependency direction: infrastructure -> domain).  This module handles
actual file I/O: listing the source folder, reading article text, and
writing the JSON documents.
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

ARTICLE_SUFFIX = ".md"
RESERVED_FILENAMES: frozenset[str] = frozenset({"README.md"})
_TMP_SUFFIX = ".tmp"


# ---------------------------------------------------------------------------
# Discovery / reading
# ---------------------------------------------------------------------------


def find_article_files(
    source_dir: Path,
    *,
    exclude: Iterable[str] = RESERVED_FILENAMES,
) -> list[Path]:
    """List the Markdown articles directly inside *source_dir*.

    Only regular ``*.md`` files are returned, sorted by name; names in
    *exclude* are skipped.  Subdirectories are not descended into.
    """
    skipped = frozenset(exclude)
    results: list[Path] = []
    for path in source_dir.iterdir():
        if path.suffix != ARTICLE_SUFFIX or path.name in skipped:
            continue
        if not path.is_file():
            continue
        results.append(path)
    return sorted(results, key=lambda p: p.name)


def read_article_file(path: Path) -> str:
    """Read an article as UTF-8 text."""
    return path.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


def render_json(document: Mapping[str, Any]) -> str:
    """Pretty-print *document* with two-space indentation, non-ASCII kept."""
    return json.dumps(document, indent=2, ensure_ascii=False)


def _tmp_path(path: Path) -> Path:
    return path.with_name(f".{path.name}{_TMP_SUFFIX}")


def write_json_documents(documents: Mapping[Path, Mapping[str, Any]]) -> list[Path]:
    """Write every document in *documents* or none of them.

    Each document is first written to a hidden temporary sibling.  Only
    once all of them are on disk are they renamed over their targets.
    If any temporary write fails, the temporaries are removed and the
    error is re-raised with no target touched.

    Returns:
        The written target paths, in input order.
    """
    staged: list[tuple[Path, Path]] = []
    try:
        for target, document in documents.items():
            target.parent.mkdir(parents=True, exist_ok=True)
            tmp = _tmp_path(target)
            staged.append((tmp, target))
            tmp.write_text(render_json(document), encoding="utf-8")
    except OSError:
        for tmp, _target in staged:
            tmp.unlink(missing_ok=True)
        raise

    for tmp, target in staged:
        os.replace(tmp, target)
        logger.debug("index.written", path=str(target))
    return [target for _tmp, target in staged]
