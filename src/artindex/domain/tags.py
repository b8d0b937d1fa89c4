"""Tag catalog — frequency counts and per-tag article listings."""

from __future__ import annotations

from pydantic import BaseModel, Field

from artindex.domain.articles import ArticleRecord


class TagArticle(BaseModel):
    """Article summary listed under a tag in ``tags.json``."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: str
    title: str
    excerpt: str
    published_at: str | None = Field(default=None, alias="publishedAt")
    path: str

    @classmethod
    def from_article(cls, article: ArticleRecord) -> TagArticle:
        return cls(
            id=article.id,
            title=article.title,
            excerpt=article.excerpt,
            published_at=article.published_at,
            path=article.path,
        )


class TagRecord(BaseModel):
    """One tag with its article count and article summaries."""

    model_config = {"frozen": True}

    name: str
    count: int
    articles: list[TagArticle] = Field(default_factory=list)


class TagsDocument(BaseModel):
    """Top-level shape of ``tags.json``."""

    model_config = {"frozen": True, "populate_by_name": True}

    tags: list[TagRecord] = Field(default_factory=list)
    total_tags: int = Field(alias="totalTags")
    last_updated: str = Field(alias="lastUpdated")


def unique_tags(tags: list[str]) -> list[str]:
    """Drop repeated tags, keeping first-seen order.

    Examples:
        >>> unique_tags(["a", "b", "a"])
        ['a', 'b']
    """
    return list(dict.fromkeys(tags))


def tally_tags(counts: dict[str, int], tags: list[str]) -> None:
    """Add one article's *tags* to *counts* in place.

    A tag listed twice by the same article counts that article once.
    New tags are appended, so *counts* keeps first-encountered order.
    """
    for tag in unique_tags(tags):
        counts[tag] = counts.get(tag, 0) + 1


def group_by_tag(articles: list[ArticleRecord]) -> dict[str, list[TagArticle]]:
    """Map each tag to summaries of the *articles* carrying it, in input order."""
    grouped: dict[str, list[TagArticle]] = {}
    for article in articles:
        summary = TagArticle.from_article(article)
        for tag in unique_tags(article.tags):
            grouped.setdefault(tag, []).append(summary)
    return grouped


def build_tag_records(
    counts: dict[str, int],
    articles: list[ArticleRecord],
) -> list[TagRecord]:
    """Build tag records sorted by count descending.

    Equal counts keep the first-encountered order of *counts*.  Article
    summaries follow the order of *articles*, which callers pass already
    sorted by publish date.
    """
    grouped = group_by_tag(articles)
    records = [
        TagRecord(name=name, count=count, articles=grouped.get(name, []))
        for name, count in counts.items()
    ]
    return sorted(records, key=lambda record: record.count, reverse=True)


def build_tags_document(
    counts: dict[str, int],
    articles: list[ArticleRecord],
    *,
    last_updated: str,
) -> TagsDocument:
    """Assemble the ``tags.json`` document."""
    return TagsDocument(
        tags=build_tag_records(counts, articles),
        total_tags=len(counts),
        last_updated=last_updated,
    )
