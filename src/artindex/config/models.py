"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, artindex.toml only contains
overrides.  A project that keeps its articles in ``Article/`` and wants
``index.json``/``tags.json`` next to it needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- artindex.toml sections ---


class BuildConfig(BaseModel):
    """[build] section."""

    model_config = {"frozen": True}

    source_dir: str = "Article"
    output_dir: str = "."
    index_file: str = "index.json"
    tags_file: str = "tags.json"
    excerpt_length: int = Field(default=200, gt=0)
    exclude: list[str] = Field(default_factory=lambda: ["README.md"])
    path_prefix: str | None = None
