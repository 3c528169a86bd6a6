"""Mini README: Abstract asset repository used by the preparation pipeline.

Structure:
    * AssetRef, Asset - lightweight references to importable mesh assets.
    * Transform - placement applied when spawning an asset into a scene.
    * InstanceHandle - a transient object living inside a scene.
    * Scene - the working world that instances are spawned into and saved.
    * AssetRepository - abstract interface implemented by concrete backends.

The pipeline never talks to a scene engine directly. Everything it needs
(enumerate, load, spawn, destroy, save, move, rename) goes through this
interface so backends can be swapped without touching the classification and
assembly logic.
"""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import numpy as np

from ..logging_utils import get_logger
from ..utils.paths import DEFAULT_GAME_ROOT

LOGGER = get_logger(__name__)

_INSTANCE_IDS = itertools.count(1)


class AssetRepositoryError(RuntimeError):
    """Raised by providers when an asset operation cannot be carried out."""


def join_package_path(folder: str, name: str) -> str:
    """Join a logical folder and a leaf name with a single separator."""

    return f"{folder.rstrip('/')}/{name}"


@dataclass(frozen=True, slots=True)
class AssetRef:
    """Reference to an asset discovered under a logical folder."""

    name: str
    package_path: str

    @property
    def folder(self) -> str:
        return self.package_path.rsplit("/", 1)[0]


@dataclass(slots=True)
class Asset:
    """A loaded asset ready to be spawned."""

    ref: AssetRef
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.ref.name


@dataclass(slots=True, eq=False)
class Transform:
    """Placement of a spawned instance.

    ``rotation`` is stored as (pitch, yaw, roll) in degrees.
    """

    location: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def as_dict(self) -> Dict[str, List[float]]:
        return {
            "location": [float(value) for value in self.location],
            "rotation": [float(value) for value in self.rotation],
        }


@dataclass(slots=True, eq=False)
class InstanceHandle:
    """Transient object spawned into a scene."""

    asset_name: str
    kind: str = "static_mesh"
    transform: Transform = field(default_factory=Transform)
    materials: Dict[int, str] = field(default_factory=dict)
    instance_id: int = field(default_factory=lambda: next(_INSTANCE_IDS))
    alive: bool = True

    def as_dict(self) -> Dict[str, Any]:
        return {
            "instance_id": self.instance_id,
            "asset": self.asset_name,
            "kind": self.kind,
            "transform": self.transform.as_dict(),
            "materials": {str(slot): path for slot, path in sorted(self.materials.items())},
        }


@dataclass(slots=True)
class Scene:
    """Working world into which assets are instantiated before persisting."""

    name: str
    package_path: str
    instances: List[InstanceHandle] = field(default_factory=list)
    dirty: bool = False

    def live_instances(self) -> List[InstanceHandle]:
        return [instance for instance in self.instances if instance.alive]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "package_path": self.package_path,
            "instances": [instance.as_dict() for instance in self.live_instances()],
        }


class AssetRepository(ABC):
    """Base interface for asset repository backends."""

    provider_name: str = "generic"

    def __init__(
        self,
        content_directory: Optional[Path] = None,
        *,
        game_root: str = DEFAULT_GAME_ROOT,
    ) -> None:
        self.content_directory = content_directory
        self.game_root = game_root.rstrip("/")
        LOGGER.debug(
            "Initialising %s repository with content directory '%s'",
            self.provider_name,
            content_directory,
        )

    @abstractmethod
    def enumerate(self, path: str) -> List[AssetRef]:
        """Return every asset located under the logical folder ``path``."""

    def enumerate_worlds(self, path: str) -> List[AssetRef]:
        """Return the world (map) assets under ``path``; defaults to ``enumerate``."""

        return self.enumerate(path)

    @abstractmethod
    def load(self, ref: AssetRef) -> Asset:
        """Load the asset behind ``ref``."""

    @abstractmethod
    def spawn(self, scene: Scene, asset: Asset, transform: Transform) -> InstanceHandle:
        """Instantiate ``asset`` into ``scene`` at ``transform``."""

    @abstractmethod
    def set_material(self, handle: InstanceHandle, slot: int, material_path: str) -> None:
        """Override the material used by ``handle`` at ``slot``."""

    @abstractmethod
    def destroy(self, handle: InstanceHandle) -> None:
        """Remove a spawned instance from its scene."""

    @abstractmethod
    def save(self, scene: Scene, filename: Path) -> bool:
        """Persist ``scene`` to ``filename``; return ``True`` when written."""

    @abstractmethod
    def move(self, assets: Iterable[Asset], destination_path: str) -> None:
        """Move ``assets`` to the logical folder ``destination_path``."""

    @abstractmethod
    def spawn_road_network(self, scene: Scene) -> InstanceHandle:
        """Spawn the helper object that generates routes and spawn points."""

    @abstractmethod
    def build_routes(self, handle: InstanceHandle, map_name: str) -> None:
        """Generate routes and vehicle spawn points for ``map_name``."""

    @abstractmethod
    def remove_routes(self, handle: InstanceHandle) -> None:
        """Remove the routes and spawn points generated by ``handle``."""

    def rename(self, scene: Scene, name: str, package_path: str) -> None:
        """Rename ``scene`` and register it under ``package_path``."""

        LOGGER.debug("Renaming scene '%s' to '%s' (%s)", scene.name, name, package_path)
        scene.name = name
        scene.package_path = package_path
        scene.dirty = True

    def mark_dirty(self, scene: Scene) -> None:
        """Flag the scene's backing package as modified."""

        scene.dirty = True

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for CLI displays."""

        return {
            "provider": self.provider_name,
            "content_directory": str(self.content_directory or "not configured"),
        }
