"""Article text extraction — frontmatter, title, and excerpt.

Everything here is a pure function over the raw file text, apart from
the error log emitted when a frontmatter block fails to decode.  The
same delimiter rule is shared by :func:`extract_frontmatter` (which
parses the block) and :func:`strip_frontmatter` (which discards it).
"""

from __future__ import annotations

import re
from typing import Any

import structlog
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

logger = structlog.get_logger(__name__)

DEFAULT_EXCERPT_LENGTH = 200
ELLIPSIS = "..."

# ``---`` line, optional YAML block, closing ``---`` line, anchored at the start.
FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(?:(?P<yaml>.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)

_HEADING_RE = re.compile(r"^#\s+(.+)$", re.MULTILINE)
_LEADING_TITLE_RE = re.compile(r"\A\s*#[ \t]+[^\n]*(?:\n|\Z)")
_DATE_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}_")
_MD_SUFFIX_RE = re.compile(r"\.md$")

_IMAGE_EMBED_RE = re.compile(r"!\[\[.*?\]\]")
_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
_MARKUP_RE = re.compile(r"[#*`_~]")
_NEWLINES_RE = re.compile(r"(?:\r?\n)+")


class FrontmatterError(ValueError):
    """A delimited frontmatter block that is not a YAML mapping."""


def _new_yaml() -> YAML:
    """Create a fresh safe YAML loader (plain dicts, lists, and scalars).

    ruamel.yaml's YAML object is stateful, so a new instance per call
    keeps a failed load from leaking into the next file.
    """
    return YAML(typ="safe", pure=True)


# ---------------------------------------------------------------------------
# Frontmatter
# ---------------------------------------------------------------------------


def load_frontmatter(content: str) -> dict[str, Any] | None:
    """Decode the leading frontmatter block of *content*.

    Returns ``None`` when there is no delimited block or when the block
    is empty.  An explicit empty mapping (``{}``) is returned as-is.

    Raises:
        FrontmatterError: If the block is not valid YAML or does not
            decode to a mapping.
    """
    match = FRONTMATTER_RE.match(content)
    if match is None:
        return None

    yaml_block = match.group("yaml") or ""
    try:
        data = _new_yaml().load(yaml_block)
    except (YAMLError, ValueError, OverflowError) as exc:
        # Impossible or out-of-range dates (2024-02-30) are not YAMLErrors.
        msg = f"Invalid YAML frontmatter: {exc}"
        raise FrontmatterError(msg) from exc

    if data is None:
        return None
    if not isinstance(data, dict):
        msg = f"Frontmatter must be a mapping, got {type(data).__name__}"
        raise FrontmatterError(msg)
    return data


def extract_frontmatter(content: str, *, source: str | None = None) -> dict[str, Any] | None:
    """Return the frontmatter mapping of *content*, or ``None``.

    A malformed block is logged at error level and reported as ``None``
    so the caller can skip the file and carry on with the batch.
    """
    try:
        return load_frontmatter(content)
    except FrontmatterError as exc:
        logger.error("frontmatter.parse_failed", source=source, error=str(exc))
        return None


def strip_frontmatter(content: str) -> str:
    """Remove a leading frontmatter block without decoding it."""
    return FRONTMATTER_RE.sub("", content, count=1)


# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------


def title_from_filename(filename: str) -> str:
    """Strip a ``YYYY-MM-DD_`` prefix and the ``.md`` suffix.

    Examples:
        >>> title_from_filename("2024-01-15_hello-world.md")
        'hello-world'
        >>> title_from_filename("notes.md")
        'notes'
    """
    return _MD_SUFFIX_RE.sub("", _DATE_PREFIX_RE.sub("", filename))


def extract_title(filename: str, content: str) -> str:
    """Return the first ``# `` heading in *content*, else a filename-derived title."""
    match = _HEADING_RE.search(content)
    if match:
        title = match.group(1).strip()
        if title:
            return title
    return title_from_filename(filename)


# ---------------------------------------------------------------------------
# Excerpt
# ---------------------------------------------------------------------------


def to_plain_text(markdown: str) -> str:
    """Flatten Markdown into a single line of plain text."""
    text = _IMAGE_EMBED_RE.sub("", markdown)
    text = _LINK_RE.sub(r"\1", text)
    text = _MARKUP_RE.sub("", text)
    text = _NEWLINES_RE.sub(" ", text)
    return text.strip()


def extract_excerpt(content: str, max_length: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """Build a plain-text preview of at most *max_length* characters.

    The frontmatter block and the leading title heading are dropped
    before the markup is flattened.  Longer text is cut at *max_length*
    (possibly mid-word) and suffixed with :data:`ELLIPSIS`.
    """
    body = _LEADING_TITLE_RE.sub("", strip_frontmatter(content), count=1)
    plain = to_plain_text(body)
    if len(plain) <= max_length:
        return plain
    return plain[:max_length].rstrip() + ELLIPSIS
