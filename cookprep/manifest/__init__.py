"""Mini README: Package manifest subsystem.

``reader`` turns ``<Package>.Package.json`` into the typed ``PackageManifest``
consumed by the orchestration layer.
"""

from .reader import ManifestDocument, ManifestReader, MapEntry, PackageManifest

__all__ = ["ManifestDocument", "ManifestReader", "MapEntry", "PackageManifest"]
