"""Mini README: Concrete asset repository implementations.

New backends should subclass ``AssetRepository`` and call
``REGISTRY.register`` during module import to become selectable by name.
"""

from .local_provider import LocalContentRepository
from .memory_provider import InMemoryAssetRepository

__all__ = ["InMemoryAssetRepository", "LocalContentRepository"]
