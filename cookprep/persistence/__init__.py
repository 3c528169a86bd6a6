"""Mini README: Scene persistence subsystem."""

from .persister import PackagePersister

__all__ = ["PackagePersister"]
