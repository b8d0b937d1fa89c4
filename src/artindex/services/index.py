"""IndexService — build ``index.json`` and ``tags.json`` from an article folder.

One linear pass: list the folder, extract each article, tally tags,
sort, then write both documents together.  Per-file problems become
warnings; only a missing source folder or a failed write fails the run.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import structlog

from artindex.config.models import BuildConfig
from artindex.domain.articles import (
    ArticleRecord,
    build_article,
    build_index_document,
    format_timestamp,
    sort_articles,
)
from artindex.domain.content import extract_frontmatter
from artindex.domain.tags import build_tags_document, tally_tags
from artindex.infrastructure.filesystem import (
    find_article_files,
    read_article_file,
    write_json_documents,
)
from artindex.services.base import BaseService
from artindex.services.result import ServiceResult

logger = structlog.get_logger(__name__)

OP_BUILD = "build_index"


class IndexService(BaseService):
    """Generate the article and tag indexes for one source folder."""

    def build(
        self,
        *,
        config: BuildConfig | None = None,
        dry_run: bool = False,
        now: datetime | None = None,
    ) -> ServiceResult:
        """Scan the source folder and write both JSON documents.

        Args:
            config: Build options; defaults to the ``[build]`` settings.
            dry_run: Build the documents but write nothing.
            now: Generation time stamped into ``lastUpdated``.
        """
        cfg = config or self._settings.build
        source_dir = self._path(cfg.source_dir)
        with structlog.contextvars.bound_contextvars(source_dir=str(source_dir)):
            return self._build(cfg, source_dir, dry_run=dry_run, now=now)

    def _build(
        self,
        cfg: BuildConfig,
        source_dir: Path,
        *,
        dry_run: bool,
        now: datetime | None,
    ) -> ServiceResult:
        output_dir = self._path(cfg.output_dir)
        index_path = output_dir / cfg.index_file
        tags_path = output_dir / cfg.tags_file

        if not source_dir.is_dir():
            logger.error("source.missing")
            return ServiceResult.failure(
                OP_BUILD,
                "SOURCE_NOT_FOUND",
                f"Article directory '{source_dir}' not found",
                source_dir=str(source_dir),
            )

        path_prefix = cfg.path_prefix if cfg.path_prefix is not None else source_dir.name
        warnings: list[str] = []
        skipped: list[str] = []
        articles: list[ArticleRecord] = []
        tag_counts: dict[str, int] = {}

        for path in find_article_files(source_dir, exclude=cfg.exclude):
            article = self._load_article(
                path,
                path_prefix=path_prefix,
                excerpt_length=cfg.excerpt_length,
                warnings=warnings,
            )
            if article is None:
                skipped.append(path.name)
                continue
            articles.append(article)
            tally_tags(tag_counts, article.tags)

        ordered = sort_articles(articles)
        stamp = format_timestamp(now or datetime.now(UTC))
        index_doc = build_index_document(ordered, last_updated=stamp)
        tags_doc = build_tags_document(tag_counts, ordered, last_updated=stamp)

        if not dry_run:
            try:
                write_json_documents(
                    {
                        index_path: index_doc.model_dump(by_alias=True),
                        tags_path: tags_doc.model_dump(by_alias=True),
                    }
                )
            except OSError as exc:
                logger.error("index.write_failed", error=str(exc))
                return ServiceResult.failure(
                    OP_BUILD,
                    "WRITE_FAILED",
                    f"Could not write index files: {exc}",
                    index_file=str(index_path),
                    tags_file=str(tags_path),
                )

        logger.info(
            "index.built",
            articles=index_doc.total_count,
            tags=tags_doc.total_tags,
            skipped=len(skipped),
            dry_run=dry_run,
        )

        data: dict[str, Any] = {
            "source_dir": str(source_dir),
            "index_file": str(index_path),
            "tags_file": str(tags_path),
            "written": not dry_run,
            "article_count": index_doc.total_count,
            "tag_count": tags_doc.total_tags,
            "articles": [{"id": a.id, "title": a.title, "tags": a.tags} for a in ordered],
            "tags": [{"name": t.name, "count": t.count} for t in tags_doc.tags],
            "skipped": skipped,
        }
        return ServiceResult(ok=True, op=OP_BUILD, data=data, warnings=warnings)

    def _load_article(
        self,
        path: Path,
        *,
        path_prefix: str,
        excerpt_length: int,
        warnings: list[str],
    ) -> ArticleRecord | None:
        """Read and extract one file; ``None`` means skip it."""
        try:
            content = read_article_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            self._warn(warnings, f"Could not read {path.name}: {exc}", path=str(path))
            return None

        frontmatter = extract_frontmatter(content, source=path.name)
        if frontmatter is None:
            self._warn(warnings, f"No frontmatter found in {path.name}", path=str(path))
            return None

        return build_article(
            path.name,
            content,
            frontmatter,
            path_prefix=path_prefix,
            excerpt_length=excerpt_length,
        )
