"""Mini README: Persist assembled scenes as map packages.

Structure:
    * PackagePersister - renames the scene, applies the road-network fixup
      when an OpenDRIVE descriptor exists, and saves without overwriting.

Saving is idempotent: a package that already exists on disk is left alone
and the call reports ``False``. Re-running a batch over a built package is
therefore cheap.
"""

from __future__ import annotations

from pathlib import Path

from ..logging_utils import get_logger
from ..repository import AssetRepository, Scene
from ..utils.paths import DEFAULT_GAME_ROOT, package_path_to_filename

LOGGER = get_logger(__name__)


class PackagePersister:
    """Save scenes to ``<dest_path>/<map_name>`` packages."""

    def __init__(
        self,
        repository: AssetRepository,
        content_directory: Path,
        *,
        package_extension: str = ".umap",
        game_root: str = DEFAULT_GAME_ROOT,
    ) -> None:
        self.repository = repository
        self.content_directory = Path(content_directory)
        self.package_extension = package_extension
        self.game_root = game_root

    def package_filename(self, package_path: str) -> Path:
        """File that backs the logical ``package_path``."""

        return package_path_to_filename(
            self.content_directory, package_path, self.package_extension, game_root=self.game_root
        )

    def road_network_descriptor(self, package_name: str, map_name: str) -> Path:
        """Location of the OpenDRIVE file that triggers the routes fixup."""

        return self.content_directory / package_name / "Maps" / map_name / "OpenDrive" / f"{map_name}.xodr"

    def save_as(self, scene: Scene, package_name: str, dest_path: str, map_name: str) -> bool:
        """Save ``scene`` as ``dest_path/map_name``; ``False`` when it already exists."""

        package_path = f"{dest_path.rstrip('/')}/{map_name}"
        self.repository.rename(scene, map_name, package_path)
        self.repository.mark_dirty(scene)

        filename = self.package_filename(package_path)
        if filename.exists():
            LOGGER.info("Package %s already exists at %s; not saving", package_path, filename)
            return False

        descriptor = self.road_network_descriptor(package_name, map_name)
        if descriptor.is_file():
            LOGGER.info("Road network descriptor found for %s; generating routes", map_name)
            saved = self._save_with_road_network(scene, filename, map_name)
        else:
            saved = self.repository.save(scene, filename)

        if saved:
            LOGGER.info("Saved %s to %s", package_path, filename)
        else:
            LOGGER.warning("Repository did not write %s", filename)
        return saved

    def _save_with_road_network(self, scene: Scene, filename: Path, map_name: str) -> bool:
        helper = self.repository.spawn_road_network(scene)
        try:
            self.repository.build_routes(helper, map_name)
            return self.repository.save(scene, filename)
        finally:
            self.repository.remove_routes(helper)
            self.repository.destroy(helper)
