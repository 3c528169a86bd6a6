"""Mini README: Entry point tying the preparation pipeline together.

Structure:
    * RunSummary - counters reported at the end of a run.
    * Orchestrator - reads the manifest and runs exactly one mode:
        1. move-meshes: relocate every map's imported meshes;
        2. prepare-maps: assemble, save and clean up one map at a time;
        3. full-prepare: build the props map and write the path files.

Every mode starts from a freshly loaded base world. Nothing here is fatal:
missing inputs turn a mode into a no-op and per-map repository failures are
logged and skipped, so ``run`` always returns 0.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..assembly import AssemblyContext, SceneAssembler
from ..classification import AssetClassifier, SemanticCategory
from ..configuration import CookPrepSettings, get_settings
from ..export import PathFileEmitter
from ..logging_utils import get_logger
from ..manifest import ManifestReader, MapEntry
from ..persistence import PackagePersister
from ..relocation import AssetRelocator
from ..repository import REGISTRY, AssetRepository, AssetRepositoryError, Scene
from .params import OperatingParams

LOGGER = get_logger(__name__)

PROPS_MAP_NAME = "PropsMap"


@dataclass(slots=True)
class RunSummary:
    """What a single run did."""

    mode: str
    maps_saved: List[str] = field(default_factory=list)
    maps_skipped: List[str] = field(default_factory=list)
    maps_failed: List[str] = field(default_factory=list)
    assets_moved: int = 0
    assets_skipped: int = 0
    props_skipped: List[str] = field(default_factory=list)
    path_files: List[str] = field(default_factory=list)


def prop_folder(prop_path: str) -> str:
    """Folder containing a prop asset path (the path minus its last segment)."""

    return prop_path.rsplit("/", 1)[0] if "/" in prop_path else prop_path


class Orchestrator:
    """Run one preparation mode for a package."""

    def __init__(
        self,
        settings: Optional[CookPrepSettings] = None,
        repository: Optional[AssetRepository] = None,
    ) -> None:
        self.settings = settings or get_settings()
        content_directory = self.settings.content_directory
        self.repository = repository or REGISTRY.create(
            self.settings.repository,
            content_directory=content_directory,
            game_root=self.settings.game_root,
        )
        self.game_root = self.settings.game_root
        self.reader = ManifestReader(content_directory)
        self.classifier = AssetClassifier.from_settings(self.settings)
        self.assembler = SceneAssembler(self.repository, self.classifier)
        self.persister = PackagePersister(
            self.repository,
            content_directory,
            package_extension=self.settings.package_extension,
            game_root=self.game_root,
        )
        self.relocator = AssetRelocator(self.repository, self.classifier, game_root=self.game_root)
        self.emitter = PathFileEmitter(self.settings.effective_output_directory, self.reader)
        self.last_summary: Optional[RunSummary] = None

    def run(self, params: OperatingParams) -> int:
        """Load the manifest and dispatch to the selected mode."""

        summary = RunSummary(mode=params.mode)
        self.last_summary = summary
        LOGGER.info("Preparing package '%s' (%s)", params.package_name, params.mode)
        manifest = self.reader.read(params.package_name)

        if params.only_move_meshes:
            self.move_meshes(params.package_name, manifest.maps, summary)
        elif params.only_prepare_maps:
            self.prepare_maps(params.package_name, manifest.maps, summary)
        else:
            props_map_path = ""
            if manifest.prop_paths:
                props_map_path = f"{self.maps_folder(params.package_name)}/{PROPS_MAP_NAME}"
                self.prepare_props(params.package_name, manifest.prop_paths, summary)
            summary.path_files.append(str(self.emitter.write_map_paths_file(manifest, props_map_path)))
            summary.path_files.append(str(self.emitter.write_package_path_file(params.package_name)))

        LOGGER.info(
            "Finished %s: saved=%s skipped=%s failed=%s moved=%s skipped_assets=%s",
            summary.mode,
            len(summary.maps_saved),
            len(summary.maps_skipped),
            len(summary.maps_failed),
            summary.assets_moved,
            summary.assets_skipped,
        )
        return 0

    def is_game_path(self, path: str) -> bool:
        """True when ``path`` lies below the logical game root."""

        return path.startswith(self.game_root + "/")

    def maps_folder(self, package_name: str) -> str:
        return f"{self.game_root}/{package_name}/Maps"

    def semantic_sources(self, package_name: str, map_name: str) -> List[str]:
        """Semantic folders holding a map's relocated meshes."""

        return [
            f"{self.game_root}/{package_name}/Static/{category.value}/{map_name}"
            for category in SemanticCategory.folder_order()
        ]

    def load_world(self) -> Optional[AssemblyContext]:
        """Load the base template world into a fresh assembly context."""

        refs = self.repository.enumerate_worlds(self.settings.base_map_path)
        if not refs:
            LOGGER.warning("No base map found under %s", self.settings.base_map_path)
            return None
        asset = self.repository.load(refs[0])
        scene = Scene(name=asset.name, package_path=asset.ref.package_path)
        LOGGER.debug("Loaded base world %s", scene.package_path)
        return AssemblyContext(self.repository, scene)

    def move_meshes(
        self, package_name: str, maps: Sequence[MapEntry], summary: Optional[RunSummary] = None
    ) -> RunSummary:
        summary = summary or RunSummary(mode="move-meshes")
        for entry in maps:
            try:
                report = self.relocator.relocate(package_name, entry.name)
            except (AssetRepositoryError, ValueError):
                LOGGER.exception("Relocating meshes of %s failed", entry.name)
                summary.maps_failed.append(entry.name)
                continue
            summary.assets_moved += report.moved_count
            summary.assets_skipped += len(report.skipped)
        return summary

    def prepare_maps(
        self, package_name: str, maps: Sequence[MapEntry], summary: Optional[RunSummary] = None
    ) -> RunSummary:
        summary = summary or RunSummary(mode="prepare-maps")
        context = self.load_world()
        if context is None:
            return summary
        for entry in maps:
            if not self.is_game_path(entry.path):
                LOGGER.warning("Map %s has path %r outside %s; skipping", entry.name, entry.path, self.game_root)
                summary.maps_failed.append(entry.name)
                continue
            sources = self.semantic_sources(package_name, entry.name)
            try:
                with context.assembled(self.assembler, sources, entry.use_category_materials):
                    saved = self.persister.save_as(context.scene, package_name, entry.path, entry.name)
            except (AssetRepositoryError, ValueError):
                LOGGER.exception("Preparing map %s failed", entry.name)
                summary.maps_failed.append(entry.name)
                continue
            (summary.maps_saved if saved else summary.maps_skipped).append(entry.name)
        return summary

    def prepare_props(
        self, package_name: str, prop_paths: Sequence[str], summary: Optional[RunSummary] = None
    ) -> RunSummary:
        """Spawn every declared prop into one world saved as ``PropsMap``."""

        summary = summary or RunSummary(mode="full-prepare")
        context = self.load_world()
        if context is None:
            return summary
        folders: List[str] = []
        for path in prop_paths:
            folder = prop_folder(path)
            if not self.is_game_path(folder):
                LOGGER.warning("Prop %r is outside %s; skipping", path, self.game_root)
                summary.props_skipped.append(path)
            elif folder not in folders:
                folders.append(folder)
        if not folders:
            LOGGER.warning("No prop folders under %s; %s not built", self.game_root, PROPS_MAP_NAME)
            return summary
        try:
            with context.assembled(self.assembler, folders, False):
                saved = self.persister.save_as(
                    context.scene, package_name, self.maps_folder(package_name), PROPS_MAP_NAME
                )
        except (AssetRepositoryError, ValueError):
            LOGGER.exception("Preparing %s failed", PROPS_MAP_NAME)
            summary.maps_failed.append(PROPS_MAP_NAME)
            return summary
        (summary.maps_saved if saved else summary.maps_skipped).append(PROPS_MAP_NAME)
        return summary
