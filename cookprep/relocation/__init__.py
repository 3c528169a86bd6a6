"""Mini README: Asset relocation subsystem (move-only mode)."""

from .relocator import AssetRelocator, RelocationReport, SkippedAsset

__all__ = ["AssetRelocator", "RelocationReport", "SkippedAsset"]
