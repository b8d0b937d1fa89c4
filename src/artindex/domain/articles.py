"""Article records, frontmatter coercion, and publish-date ordering.

Records are frozen Pydantic models whose aliases are the camelCase keys
of the emitted JSON.  Dump them with ``model_dump(by_alias=True)``.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, time
from typing import Any

from pydantic import BaseModel, Field

from artindex.domain.content import (
    DEFAULT_EXCERPT_LENGTH,
    extract_excerpt,
    extract_title,
)

_MD_SUFFIX = ".md"
_EPOCH_FLOOR = datetime.min.replace(tzinfo=UTC)


class ArticleRecord(BaseModel):
    """One accepted article as listed in ``index.json``."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: str
    title: str
    excerpt: str
    tags: list[str] = Field(default_factory=list)
    created_at: str | None = Field(default=None, alias="createdAt")
    published_at: str | None = Field(default=None, alias="publishedAt")
    filename: str
    path: str


class IndexDocument(BaseModel):
    """Top-level shape of ``index.json``."""

    model_config = {"frozen": True, "populate_by_name": True}

    articles: list[ArticleRecord] = Field(default_factory=list)
    total_count: int = Field(alias="totalCount")
    last_updated: str = Field(alias="lastUpdated")


# ---------------------------------------------------------------------------
# Coercion of recognized frontmatter keys
# ---------------------------------------------------------------------------


def format_timestamp(value: datetime) -> str:
    """Render *value* as UTC ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    Naive datetimes are taken to already be in UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def coerce_timestamp(value: Any) -> str | None:
    """Coerce a ``createdAt``/``publishedAt`` value to an ISO string or ``None``."""
    if not value:
        return None
    if isinstance(value, datetime):
        try:
            return format_timestamp(value)
        except OverflowError:
            return value.isoformat()
    if isinstance(value, date):
        return format_timestamp(datetime.combine(value, time.min, tzinfo=UTC))
    if isinstance(value, str):
        return value
    return str(value)


def coerce_tags(value: Any) -> list[str]:
    """Coerce a ``tags`` value to a list of strings.

    Order and duplicates are kept; null items are dropped.  A lone
    string becomes a one-element list, any other scalar yields ``[]``.
    """
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    return []


def article_stem(filename: str) -> str:
    """Filename without its ``.md`` extension."""
    return filename[: -len(_MD_SUFFIX)] if filename.endswith(_MD_SUFFIX) else filename


def build_article(
    filename: str,
    content: str,
    frontmatter: dict[str, Any],
    *,
    path_prefix: str,
    excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
) -> ArticleRecord:
    """Assemble the :class:`ArticleRecord` for one file."""
    raw_id = frontmatter.get("id")
    created = frontmatter.get("createdAt")
    published = frontmatter.get("publishedAt")
    prefix = path_prefix.rstrip("/")

    return ArticleRecord(
        id=str(raw_id) if raw_id else article_stem(filename),
        title=extract_title(filename, content),
        excerpt=extract_excerpt(content, excerpt_length),
        tags=coerce_tags(frontmatter.get("tags")),
        created_at=coerce_timestamp(created or published),
        published_at=coerce_timestamp(published or created),
        filename=filename,
        path=f"{prefix}/{filename}" if prefix else filename,
    )


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO 8601 string into an aware UTC datetime.

    Returns ``None`` for missing or unparseable values, and for instants
    that fall outside the representable UTC range.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except OverflowError:
        return None


def _publish_key(article: ArticleRecord) -> tuple[bool, datetime]:
    parsed = parse_timestamp(article.published_at)
    if parsed is None:
        return False, _EPOCH_FLOOR
    return True, parsed


def sort_articles(articles: list[ArticleRecord]) -> list[ArticleRecord]:
    """Order articles newest first; undated articles go last.

    The sort is stable, so undated articles and exact-timestamp ties
    keep their incoming order.
    """
    return sorted(articles, key=_publish_key, reverse=True)


def build_index_document(articles: list[ArticleRecord], *, last_updated: str) -> IndexDocument:
    """Wrap already-sorted *articles* into the ``index.json`` document."""
    return IndexDocument(
        articles=articles,
        total_count=len(articles),
        last_updated=last_updated,
    )
