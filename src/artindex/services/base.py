"""BaseService — shared foundation for artindex services.

Every service receives the resolved :class:`ArtSettings` at construction
time and derives its paths from it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from artindex.config.settings import ArtSettings

logger = structlog.get_logger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class IndexService(BaseService):
            def build(self) -> ServiceResult:
                source = self._path(self._settings.build.source_dir)
                ...
    """

    def __init__(self, settings: ArtSettings) -> None:
        self._settings = settings

    def _path(self, value: str) -> Path:
        """Resolve a configured path against the project root."""
        return self._settings.resolve(value)

    def _warn(self, warnings: list[str], message: str, **fields: object) -> None:
        """Record a non-fatal issue both in the log and in *warnings*."""
        logger.warning(message, **fields)
        warnings.append(message)
