"""Mini README: Asset repository backed by a local content directory.

Structure:
    * LocalContentRepository - treats ``*.uasset`` files under the content
      directory as mesh assets, ``*.umap`` files as worlds, and moves meshes
      with file renames.

Scene bookkeeping (spawning, materials, road-network helpers) is inherited
from the in-memory provider; only discovery and relocation touch the disk.
Saved map packages are never enumerated as meshes, so relocating a map's
import folder leaves its ``.umap`` in place.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .memory_provider import InMemoryAssetRepository
from ..base import Asset, AssetRef, AssetRepositoryError, join_package_path
from ..registry import REGISTRY
from ...logging_utils import get_logger
from ...utils.paths import DEFAULT_GAME_ROOT, filename_to_package_path, package_path_to_filename

LOGGER = get_logger(__name__)

MESH_SUFFIX = ".uasset"
WORLD_SUFFIX = ".umap"


class LocalContentRepository(InMemoryAssetRepository):
    """Repository reading assets from files below a content directory."""

    provider_name = "local"

    def __init__(
        self,
        content_directory: Optional[Path] = None,
        *,
        game_root: str = DEFAULT_GAME_ROOT,
    ) -> None:
        self.root = Path(content_directory or "Content")
        super().__init__(content_directory=self.root, game_root=game_root)

    def enumerate(self, path: str) -> List[AssetRef]:
        refs = self._scan(path, MESH_SUFFIX)
        LOGGER.debug("Enumerated %s mesh assets under %s", len(refs), path)
        return refs

    def enumerate_worlds(self, path: str) -> List[AssetRef]:
        return self._scan(path, WORLD_SUFFIX)

    def load(self, ref: AssetRef) -> Asset:
        filename = self._locate(ref)
        if filename is None:
            raise AssetRepositoryError(f"No file backs asset {ref.package_path}")
        return Asset(ref=ref, payload={"filename": str(filename)})

    def move(self, assets: Iterable[Asset], destination_path: str) -> None:
        destination = self._filename(destination_path)
        destination.mkdir(parents=True, exist_ok=True)
        for asset in assets:
            source = self._locate(asset.ref)
            if source is None:
                raise AssetRepositoryError(f"No file backs asset {asset.ref.package_path}")
            target = destination / source.name
            LOGGER.debug("Moving %s -> %s", source, target)
            source.rename(target)
            asset.ref = AssetRef(name=asset.name, package_path=join_package_path(destination_path, asset.name))
            asset.payload["filename"] = str(target)
            self.moves.append((asset.name, destination_path.rstrip("/")))

    def _filename(self, package_path: str, extension: str = "") -> Path:
        return package_path_to_filename(self.root, package_path, extension, game_root=self.game_root)

    def _scan(self, path: str, suffix: str) -> List[AssetRef]:
        folder = self._filename(path)
        if not folder.is_dir():
            LOGGER.debug("Folder %s does not exist; nothing to enumerate", folder)
            return []
        refs: List[AssetRef] = []
        for filename in sorted(folder.rglob(f"*{suffix}")):
            if not filename.is_file():
                continue
            package_path = filename_to_package_path(self.root, filename, game_root=self.game_root)
            if package_path is not None:
                refs.append(AssetRef(name=filename.stem, package_path=package_path))
        return refs

    def _locate(self, ref: AssetRef) -> Optional[Path]:
        for suffix in (MESH_SUFFIX, WORLD_SUFFIX):
            candidate = self._filename(ref.package_path, suffix)
            if candidate.is_file():
                return candidate
        return None


REGISTRY.register(LocalContentRepository)
