"""Mini README: Provider registry for asset repository backends.

Structure:
    * RepositoryRegistry - maps provider identifiers to ``AssetRepository``
      subclasses and instantiates them on demand.

Concrete providers register themselves on import, so the CLI can pick a
backend by name from configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Optional, Type

from .base import AssetRepository
from ..logging_utils import get_logger
from ..utils.paths import DEFAULT_GAME_ROOT

LOGGER = get_logger(__name__)


class RepositoryRegistry:
    """Simple registry for mapping provider identifiers to classes."""

    def __init__(self) -> None:
        self._providers: Dict[str, Type[AssetRepository]] = {}

    def register(self, provider: Type[AssetRepository]) -> None:
        """Register a new provider class with the registry."""

        identifier = provider.provider_name.lower()
        LOGGER.debug("Registering repository provider '%s'", identifier)
        self._providers[identifier] = provider

    def available_providers(self) -> Iterable[str]:
        """Return iterable of provider identifiers for display."""

        return sorted(self._providers.keys())

    def create(
        self,
        identifier: str,
        *,
        content_directory: Optional[Path] = None,
        game_root: str = DEFAULT_GAME_ROOT,
    ) -> AssetRepository:
        """Instantiate a provider matching the identifier."""

        provider_cls = self._providers.get(identifier.lower())
        if not provider_cls:
            raise KeyError(f"Unknown asset repository provider '{identifier}'")
        LOGGER.info("Creating asset repository '%s'", identifier)
        return provider_cls(content_directory=content_directory, game_root=game_root)


REGISTRY = RepositoryRegistry()
