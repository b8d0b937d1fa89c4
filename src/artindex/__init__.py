"""artindex — build JSON article and tag indexes from a Markdown folder."""

__version__ = "0.1.0"
