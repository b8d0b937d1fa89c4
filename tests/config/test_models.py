"""Tests for configuration section models."""

import pytest
from pydantic import ValidationError

from artindex.config.models import BuildConfig


class TestBuildConfig:
    def test_defaults(self) -> None:
        cfg = BuildConfig()
        assert cfg.source_dir == "Article"
        assert cfg.output_dir == "."
        assert cfg.index_file == "index.json"
        assert cfg.tags_file == "tags.json"
        assert cfg.excerpt_length == 200
        assert cfg.exclude == ["README.md"]
        assert cfg.path_prefix is None

    def test_frozen(self) -> None:
        cfg = BuildConfig()
        with pytest.raises(ValidationError):
            cfg.source_dir = "posts"  # type: ignore[misc]

    @pytest.mark.parametrize("length", [0, -5])
    def test_excerpt_length_must_be_positive(self, length: int) -> None:
        with pytest.raises(ValidationError):
            BuildConfig(excerpt_length=length)

    def test_exclude_lists_are_independent(self) -> None:
        assert BuildConfig().exclude is not BuildConfig().exclude

    def test_partial_override(self) -> None:
        cfg = BuildConfig(source_dir="content/posts", path_prefix="/posts")
        assert cfg.source_dir == "content/posts"
        assert cfg.path_prefix == "/posts"
        assert cfg.index_file == "index.json"
