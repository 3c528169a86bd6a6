"""Mini README: Compose scene content from classified assets.

Structure:
    * DEFAULT_TRANSFORM - origin placement with a 180 degree yaw.
    * SpawnedInstanceSet - ordered handles created by one assembly pass.
    * SceneAssembler - spawns every asset under a set of folders into a scene.
    * AssemblyContext - owns the working scene and guarantees cleanup.

Assets are authored facing the opposite direction, hence the yaw. The
assembler never cleans up after itself; callers either destroy the returned
set explicitly or use ``AssemblyContext.assembled`` which does it on exit.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

import numpy as np

from ..classification import AssetClassifier
from ..logging_utils import get_logger
from ..repository import AssetRepository, InstanceHandle, Scene, Transform

LOGGER = get_logger(__name__)

DEFAULT_LOCATION = (0.0, 0.0, 0.0)
DEFAULT_ROTATION = (0.0, 180.0, 0.0)


def default_transform() -> Transform:
    """Placement used for every spawned asset."""

    return Transform(location=np.array(DEFAULT_LOCATION), rotation=np.array(DEFAULT_ROTATION))


DEFAULT_TRANSFORM = default_transform()


class SpawnedInstanceSet:
    """Instances spawned into one scene during a single assembly pass."""

    def __init__(self, scene: Scene, handles: Optional[List[InstanceHandle]] = None) -> None:
        self.scene = scene
        self._handles: List[InstanceHandle] = list(handles or [])

    def add(self, handle: InstanceHandle) -> None:
        self._handles.append(handle)

    def __iter__(self) -> Iterator[InstanceHandle]:
        return iter(self._handles)

    def __len__(self) -> int:
        return len(self._handles)

    @property
    def asset_names(self) -> List[str]:
        return [handle.asset_name for handle in self._handles]

    def destroy(self, repository: AssetRepository) -> int:
        """Destroy every live instance; returns how many were removed."""

        destroyed = 0
        for handle in self._handles:
            if handle.alive:
                repository.destroy(handle)
                destroyed += 1
        self._handles.clear()
        repository.mark_dirty(self.scene)
        LOGGER.debug("Destroyed %s spawned instances in %s", destroyed, self.scene.name)
        return destroyed


class SceneAssembler:
    """Instantiate every asset found under the source folders into a scene."""

    def __init__(self, repository: AssetRepository, classifier: AssetClassifier) -> None:
        self.repository = repository
        self.classifier = classifier

    def assemble(
        self,
        scene: Scene,
        source_paths: Sequence[str],
        use_category_materials: bool = False,
    ) -> SpawnedInstanceSet:
        """Spawn the assets under ``source_paths`` in discovery order."""

        spawned = SpawnedInstanceSet(scene)
        try:
            for source_path in source_paths:
                for ref in self.repository.enumerate(source_path):
                    asset = self.repository.load(ref)
                    handle = self.repository.spawn(scene, asset, default_transform())
                    spawned.add(handle)
                    if use_category_materials:
                        self._apply_materials(handle, asset.name)
        except Exception:
            spawned.destroy(self.repository)
            raise
        self.repository.mark_dirty(scene)
        LOGGER.info("Spawned %s assets from %s folders into %s", len(spawned), len(source_paths), scene.name)
        return spawned

    def _apply_materials(self, handle: InstanceHandle, asset_name: str) -> None:
        override = self.classifier.material_override(asset_name)
        if override is None:
            return
        for slot, material_path in override.slots.items():
            self.repository.set_material(handle, slot, material_path)
        LOGGER.debug("Applied %s materials to %s", override.kind.value, asset_name)


class AssemblyContext:
    """Working scene plus the instances currently spawned into it."""

    def __init__(self, repository: AssetRepository, scene: Scene) -> None:
        self.repository = repository
        self.scene = scene
        self.live: Optional[SpawnedInstanceSet] = None

    @contextmanager
    def assembled(
        self,
        assembler: SceneAssembler,
        source_paths: Sequence[str],
        use_category_materials: bool = False,
    ) -> Iterator[SpawnedInstanceSet]:
        """Assemble into the scene and destroy the spawned set on exit."""

        if self.live is not None:
            raise RuntimeError("Previous assembly pass was not cleaned up")
        self.live = assembler.assemble(self.scene, source_paths, use_category_materials)
        try:
            yield self.live
        finally:
            self.live.destroy(self.repository)
            self.live = None
