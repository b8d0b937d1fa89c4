"""Command: build index.json and tags.json from the article folder."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

if TYPE_CHECKING:
    from artindex.commands._context import AppContext


@click.command()
@click.option(
    "--source",
    "source_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Article folder to scan (default: [build] source_dir).",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Folder receiving index.json and tags.json.",
)
@click.option(
    "--excerpt-length",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum excerpt length in characters.",
)
@click.option("--dry-run", is_flag=True, help="Build and report without writing files.")
@click.pass_obj
def build(
    app: AppContext,
    source_dir: str | None,
    output_dir: str | None,
    excerpt_length: int | None,
    dry_run: bool,
) -> None:
    """Scan Markdown articles and write the article and tag indexes."""
    from artindex.services.index import IndexService

    overrides: dict[str, Any] = {
        key: value
        for key, value in (
            ("source_dir", source_dir),
            ("output_dir", output_dir),
            ("excerpt_length", excerpt_length),
        )
        if value is not None
    }
    config = app.settings.build.model_copy(update=overrides)
    app.emit(IndexService(app.settings).build(config=config, dry_run=dry_run))
