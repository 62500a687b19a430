"""Mini README: Import source registry.

Structure:
    * ImportSourceRegistry - maps source identifiers to ``ImportSource`` classes.

Built-in sources register themselves when ``financemap.importers`` is
imported; additional sources can call ``REGISTRY.register`` the same way.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Type

from ..logging_utils import get_logger
from .base import ImportSource

LOGGER = get_logger(__name__)


class ImportSourceRegistry:
    """Simple registry for mapping source identifiers to classes."""

    def __init__(self) -> None:
        self._sources: Dict[str, Type[ImportSource]] = {}

    def register(self, source: Type[ImportSource]) -> None:
        """Register an import source class under its ``source_name``.

        Registering the same class twice is a no-op; a different class
        claiming a taken name is rejected.
        """

        if not (isinstance(source, type) and issubclass(source, ImportSource)):
            raise TypeError(f"{source!r} is not an ImportSource subclass")
        identifier = source.source_name.strip().lower()
        if not identifier or identifier == ImportSource.source_name:
            raise ValueError(f"{source.__name__} must define its own source_name")
        existing = self._sources.get(identifier)
        if existing is source:
            return
        if existing is not None:
            raise ValueError(
                f"Import source '{identifier}' is already provided by {existing.__name__}"
            )
        LOGGER.debug("Registering import source '%s'", identifier)
        self._sources[identifier] = source

    def available_sources(self) -> Iterable[str]:
        """Return iterable of source identifiers for display."""

        return sorted(self._sources.keys())

    def create(self, identifier: str, **options: Any) -> ImportSource:
        """Instantiate the source matching ``identifier``."""

        source_cls = self._sources.get(identifier.lower())
        if not source_cls:
            raise KeyError(f"Unknown import source '{identifier}'")
        LOGGER.info("Creating import source '%s'", identifier)
        return source_cls(**options)


REGISTRY = ImportSourceRegistry()
