"""Mini README: Asset repository subsystem package initialiser.

Re-exports the abstract repository interface, its value types and the
provider registry. ``base`` holds the abstractions, ``registry`` the plugin
management and ``providers`` the concrete backends.
"""

from .base import (
    Asset,
    AssetRef,
    AssetRepository,
    AssetRepositoryError,
    InstanceHandle,
    Scene,
    Transform,
)
from .registry import REGISTRY, RepositoryRegistry
from . import providers  # noqa: F401  # ensure built-in providers register on import

__all__ = [
    "Asset",
    "AssetRef",
    "AssetRepository",
    "AssetRepositoryError",
    "InstanceHandle",
    "REGISTRY",
    "RepositoryRegistry",
    "Scene",
    "Transform",
]
