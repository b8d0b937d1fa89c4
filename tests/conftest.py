"""Shared pytest fixtures and test helpers for artindex tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from artindex.config.settings import ArtSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ambient ARTINDEX_* variables from leaking into settings."""
    monkeypatch.delenv("ARTINDEX_CONFIG", raising=False)
    monkeypatch.delenv("ARTINDEX_BUILD__SOURCE_DIR", raising=False)
    monkeypatch.delenv("ARTINDEX_BUILD__OUTPUT_DIR", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project directory with an empty ``Article/`` folder."""
    (tmp_path / "Article").mkdir()
    return tmp_path


@pytest.fixture
def article_dir(project_root: Path) -> Path:
    return project_root / "Article"


@pytest.fixture
def settings(project_root: Path) -> ArtSettings:
    """Settings rooted at the temporary project, defaults otherwise."""
    return ArtSettings.from_cli(project_root=project_root)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI builds there.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------

WriteArticle = Callable[..., Path]


def _write_article(
    directory: Path,
    filename: str,
    body: str = "Body text.",
    *,
    frontmatter: str | None = "tags: []",
) -> Path:
    path = directory / filename
    if frontmatter is None:
        path.write_text(body, encoding="utf-8")
    else:
        path.write_text(f"---\n{frontmatter}\n---\n{body}", encoding="utf-8")
    return path


@pytest.fixture
def write_article() -> WriteArticle:
    """Return a helper writing a Markdown file into a directory.

    ``write_article(dir, name, body, frontmatter=...)`` wraps *body* in a
    frontmatter block unless *frontmatter* is None.
    """
    return _write_article
