"""Rich renderers for the build ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Successful results are rendered as the build summary; failures as a
single error line.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from rich.text import Text

from artindex.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from artindex.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _render_build(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


def article_line(title: str, tags: list[str]) -> str:
    """Summary line for one article: ``- <title> (<tags>)``."""
    return f"- {title} ({', '.join(tags)})"


def tag_line(name: str, count: int) -> str:
    """Summary line for one tag: ``- <tag>: <count> article(s)``."""
    return f"- {name}: {count} article(s)"


# ── Helpers ───────────────────────────────────────────────────────────


def _line(console: Console, *parts: Text | str) -> None:
    """Print one unwrapped line; plain strings are never parsed as markup."""
    console.print(*parts, sep="", soft_wrap=True)


def _field(console: Console, key: str, value: Any) -> None:
    style = "art.path" if key.endswith(("_dir", "_file")) else ""
    _line(console, Text(f"  {key}: ", style="art.key"), Text(str(value), style=style))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    _line(
        console,
        Text("ERROR", style="art.error"),
        Text(f"  {result.op}", style="art.op"),
        Text(" — "),
        Text(msg),
    )

    if verbose and err and err.detail:
        _line(console, Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            _line(console, Text(f"    {k}: {v}"))


# ── Build renderer ────────────────────────────────────────────────────


def _render_build(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the index build summary.

    Layout::

        Generated index.json with 3 articles
        Generated tags.json with 2 tags

        Articles processed:
        - Hello World (foo, bar)

        Tags found:
        - foo: 2 article(s)
    """
    d = result.data
    index_name = Path(d.get("index_file", "index.json")).name
    tags_name = Path(d.get("tags_file", "tags.json")).name
    verb = "Generated" if d.get("written", True) else "Would generate"

    _line(console, Text(f"{verb} {index_name} with {d.get('article_count', 0)} articles"))
    _line(console, Text(f"{verb} {tags_name} with {d.get('tag_count', 0)} tags"))

    console.print()
    _line(console, Text("Articles processed:", style="art.heading"))
    for article in d.get("articles", []):
        _line(console, Text(article_line(article["title"], article["tags"])))

    console.print()
    _line(console, Text("Tags found:", style="art.heading"))
    for tag in d.get("tags", []):
        _line(console, Text(tag_line(tag["name"], tag["count"])))

    if verbose:
        console.print()
        for key in ("source_dir", "index_file", "tags_file"):
            if key in d:
                _field(console, key, d[key])
        if d.get("skipped"):
            _field(console, "skipped", ", ".join(d["skipped"]))
