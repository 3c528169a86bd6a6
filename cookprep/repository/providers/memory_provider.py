"""Mini README: In-memory asset repository.

Structure:
    * InMemoryAssetRepository - keeps assets in dictionaries keyed by folder
      and records every spawn, move and save it performs.

The provider backs the test-suite and dry runs. Saved scenes are still
written to the requested file as JSON so the idempotent-save policy, which
checks for files on disk, behaves exactly as it does with real content.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from ..base import (
    Asset,
    AssetRef,
    AssetRepository,
    AssetRepositoryError,
    InstanceHandle,
    Scene,
    Transform,
    join_package_path,
)
from ..registry import REGISTRY
from ...logging_utils import get_logger
from ...utils.paths import DEFAULT_GAME_ROOT

LOGGER = get_logger(__name__)


def _is_under(folder: str, path: str) -> bool:
    path = path.rstrip("/")
    return folder == path or folder.startswith(path + "/")


class InMemoryAssetRepository(AssetRepository):
    """Asset repository holding everything in process memory."""

    provider_name = "memory"

    def __init__(
        self,
        content_directory: Optional[Path] = None,
        *,
        game_root: str = DEFAULT_GAME_ROOT,
    ) -> None:
        super().__init__(content_directory=content_directory, game_root=game_root)
        self._folders: Dict[str, Dict[str, Asset]] = {}
        self._scene_of: Dict[int, Scene] = {}
        self._generated: Dict[int, List[InstanceHandle]] = {}
        self.saved: Dict[Path, dict] = {}
        self.moves: List[Tuple[str, str]] = []

    def add_asset(self, folder: str, name: str, **payload) -> AssetRef:
        """Seed an asset under ``folder``."""

        ref = AssetRef(name=name, package_path=join_package_path(folder, name))
        self._folders.setdefault(folder.rstrip("/"), {})[name] = Asset(ref=ref, payload=dict(payload))
        return ref

    def assets_in(self, folder: str) -> List[str]:
        """Names of assets stored directly in ``folder``."""

        return list(self._folders.get(folder.rstrip("/"), {}))

    def enumerate(self, path: str) -> List[AssetRef]:
        refs: List[AssetRef] = []
        for folder, assets in self._folders.items():
            if _is_under(folder, path):
                refs.extend(asset.ref for asset in assets.values())
        LOGGER.debug("Enumerated %s assets under %s", len(refs), path)
        return refs

    def load(self, ref: AssetRef) -> Asset:
        asset = self._folders.get(ref.folder, {}).get(ref.name)
        if asset is None:
            raise AssetRepositoryError(f"Asset {ref.package_path} is not loaded in memory")
        return asset

    def spawn(self, scene: Scene, asset: Asset, transform: Transform) -> InstanceHandle:
        handle = InstanceHandle(
            asset_name=asset.name,
            transform=Transform(location=transform.location.copy(), rotation=transform.rotation.copy()),
        )
        return self._attach(scene, handle)

    def set_material(self, handle: InstanceHandle, slot: int, material_path: str) -> None:
        handle.materials[slot] = material_path

    def destroy(self, handle: InstanceHandle) -> None:
        scene = self._scene_of.pop(handle.instance_id, None)
        if not handle.alive or scene is None:
            LOGGER.debug("Instance %s already destroyed", handle.instance_id)
            return
        handle.alive = False
        scene.instances.remove(handle)

    def save(self, scene: Scene, filename: Path) -> bool:
        document = scene.as_dict()
        filename.parent.mkdir(parents=True, exist_ok=True)
        filename.write_text(json.dumps(document, indent=2), encoding="utf-8")
        self.saved[filename] = document
        scene.dirty = False
        LOGGER.debug("Saved scene %s to %s", scene.name, filename)
        return True

    def move(self, assets: Iterable[Asset], destination_path: str) -> None:
        destination = destination_path.rstrip("/")
        for asset in assets:
            self._folders.get(asset.ref.folder, {}).pop(asset.name, None)
            asset.ref = AssetRef(name=asset.name, package_path=join_package_path(destination, asset.name))
            self._folders.setdefault(destination, {})[asset.name] = asset
            self.moves.append((asset.name, destination))

    def spawn_road_network(self, scene: Scene) -> InstanceHandle:
        return self._attach(scene, InstanceHandle(asset_name="OpenDriveActor", kind="road_network"))

    def build_routes(self, handle: InstanceHandle, map_name: str) -> None:
        scene = self._scene_of.get(handle.instance_id)
        if scene is None:
            raise AssetRepositoryError("Road network helper is not part of any scene")
        generated = [
            self._attach(scene, InstanceHandle(asset_name=f"{map_name}_Routes", kind="route")),
            self._attach(scene, InstanceHandle(asset_name=f"{map_name}_Spawners", kind="spawner")),
        ]
        self._generated.setdefault(handle.instance_id, []).extend(generated)

    def remove_routes(self, handle: InstanceHandle) -> None:
        for generated in self._generated.pop(handle.instance_id, []):
            self.destroy(generated)

    def _attach(self, scene: Scene, handle: InstanceHandle) -> InstanceHandle:
        scene.instances.append(handle)
        self._scene_of[handle.instance_id] = scene
        return handle


REGISTRY.register(InMemoryAssetRepository)
