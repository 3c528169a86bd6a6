"""Mini README: Move imported map meshes into semantic folders.

Structure:
    * SkippedAsset - an asset excluded by the source-root check.
    * RelocationReport - per-map grouping, skips and move count.
    * AssetRelocator - groups assets under ``/Game/<Package>/Maps/<Map>`` by
      category and moves them to ``/Game/<Package>/Static/<Category>/<Map>``.

Grouping happens fully in memory before any move is issued. An asset that is
not actually below the map's import folder is logged and skipped; the rest of
the batch carries on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from ..classification import AssetClassifier, SemanticCategory
from ..logging_utils import get_logger
from ..repository import Asset, AssetRepository
from ..utils.paths import DEFAULT_GAME_ROOT

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class SkippedAsset:
    """Asset left in place, with the reason it was excluded."""

    asset_name: str
    package_path: str
    reason: str


@dataclass(slots=True)
class RelocationReport:
    """Outcome of relocating one map's assets."""

    package_name: str
    map_name: str
    buckets: Dict[SemanticCategory, List[Asset]] = field(
        default_factory=lambda: {category: [] for category in SemanticCategory.folder_order()}
    )
    skipped: List[SkippedAsset] = field(default_factory=list)
    moved_count: int = 0

    def bucket_names(self) -> Dict[str, List[str]]:
        return {category.value: [asset.name for asset in assets] for category, assets in self.buckets.items()}


class AssetRelocator:
    """Re-classify and move already imported assets of a map."""

    def __init__(
        self,
        repository: AssetRepository,
        classifier: AssetClassifier,
        *,
        game_root: str = DEFAULT_GAME_ROOT,
    ) -> None:
        self.repository = repository
        self.classifier = classifier
        self.game_root = game_root.rstrip("/")

    def source_root(self, package_name: str, map_name: str) -> str:
        return f"{self.game_root}/{package_name}/Maps/{map_name}"

    def destination(self, package_name: str, category: SemanticCategory, map_name: str) -> str:
        return f"{self.game_root}/{package_name}/Static/{category.value}/{map_name}"

    def relocate(self, package_name: str, map_name: str) -> RelocationReport:
        """Group the map's assets by category and move each bucket."""

        report = RelocationReport(package_name=package_name, map_name=map_name)
        source_root = self.source_root(package_name, map_name)

        for ref in self.repository.enumerate(source_root):
            if not ref.package_path.startswith(source_root):
                LOGGER.warning("Asset %s is not under %s; skipping", ref.package_path, source_root)
                report.skipped.append(
                    SkippedAsset(
                        asset_name=ref.name,
                        package_path=ref.package_path,
                        reason=f"outside source root {source_root}",
                    )
                )
                continue
            category = self.classifier.classify(ref.name)
            report.buckets[category].append(self.repository.load(ref))

        for category, assets in report.buckets.items():
            if not assets:
                continue
            destination = self.destination(package_name, category, map_name)
            LOGGER.info("Moving %s assets of %s to %s", len(assets), map_name, destination)
            self.repository.move(list(assets), destination)
            report.moved_count += len(assets)

        return report

    def relocate_all(self, package_name: str, map_names: Iterable[str]) -> List[RelocationReport]:
        """Relocate every map in order."""

        return [self.relocate(package_name, map_name) for map_name in map_names]
