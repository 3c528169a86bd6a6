"""Mini README: End-to-end tests for the three run modes.

Structure:
    * full prepare - props map plus path files, including the empty manifest case.
    * prepare maps - one package per map with no cross-map leakage.
    * move meshes - relocation only, taking precedence over prepare maps.
"""

from __future__ import annotations

import json
from pathlib import Path

from cookprep.configuration import CookPrepSettings
from cookprep.export import MAP_PATHS_FILENAME, PACKAGE_PATH_FILENAME
from cookprep.orchestration import OperatingParams, Orchestrator, prop_folder
from cookprep.repository import AssetRef, AssetRepositoryError
from cookprep.repository.providers import InMemoryAssetRepository

TOWN_MANIFEST = {
    "maps": [
        {"name": "Town01", "path": "/Game/Town/Maps/Town01", "use_carla_materials": True},
        {"name": "Town02", "path": "/Game/Town/Maps/Town02", "use_carla_materials": False},
    ],
    "props": [
        {"path": "/Game/Town/Static/Props/Bench/SM_Bench"},
        {"path": "/Game/Town/Static/Props/Bench/SM_BenchBroken"},
        {"path": "/Game/Town/Static/Props/Lamp/SM_Lamp"},
    ],
}


def _saved(content_directory: Path, relative: str) -> dict:
    return json.loads((content_directory / relative).read_text(encoding="utf-8"))


def test_full_prepare_with_empty_manifest_still_writes_path_files(
    settings: CookPrepSettings, repository: InMemoryAssetRepository
) -> None:
    status = Orchestrator(settings=settings, repository=repository).run(OperatingParams.parse("PackageName=Ghost"))

    assert status == 0
    output = settings.effective_output_directory
    assert (output / MAP_PATHS_FILENAME).read_text(encoding="utf-8") == ""
    assert (output / PACKAGE_PATH_FILENAME).read_text(encoding="utf-8") == ""
    assert repository.saved == {}


def test_full_prepare_builds_props_map(
    settings: CookPrepSettings,
    repository: InMemoryAssetRepository,
    content_directory: Path,
    write_manifest,
) -> None:
    manifest_path = write_manifest("Town", TOWN_MANIFEST)
    repository.add_asset("/Game/Town/Static/Props/Bench", "SM_Bench")
    repository.add_asset("/Game/Town/Static/Props/Bench", "SM_BenchBroken")
    repository.add_asset("/Game/Town/Static/Props/Lamp", "SM_Lamp")
    orchestrator = Orchestrator(settings=settings, repository=repository)

    assert orchestrator.run(OperatingParams.parse("PackageName=Town")) == 0

    props_map = _saved(content_directory, "Town/Maps/PropsMap.umap")
    assert props_map["name"] == "PropsMap"
    assert [instance["asset"] for instance in props_map["instances"]] == ["SM_Bench", "SM_BenchBroken", "SM_Lamp"]
    assert all(instance["materials"] == {} for instance in props_map["instances"])
    output = settings.effective_output_directory
    assert (output / MAP_PATHS_FILENAME).read_text(encoding="utf-8") == (
        "/Game/Town/Maps/Town01/Town01+/Game/Town/Maps/Town02/Town02"
    )
    assert (output / PACKAGE_PATH_FILENAME).read_text(encoding="utf-8") == str(manifest_path.resolve())
    assert orchestrator.last_summary is not None
    assert orchestrator.last_summary.maps_saved == ["PropsMap"]


def test_prepare_maps_keeps_each_map_isolated(
    settings: CookPrepSettings,
    repository: InMemoryAssetRepository,
    content_directory: Path,
    write_manifest,
) -> None:
    write_manifest("Town", TOWN_MANIFEST)
    repository.add_asset("/Game/Town/Static/Roads/Town01", "Road_T1")
    repository.add_asset("/Game/Town/Static/RoadLines/Town01", "Marking_T1")
    repository.add_asset("/Game/Town/Static/Other/Town02", "SM_House_T2")
    repository.add_asset("/Game/Town/Static/Vegetation/Town02", "Terrain_T2")
    orchestrator = Orchestrator(settings=settings, repository=repository)

    orchestrator.run(OperatingParams.parse("PackageName=Town OnlyPrepareMaps=true"))

    town01 = _saved(content_directory, "Town/Maps/Town01/Town01.umap")
    town02 = _saved(content_directory, "Town/Maps/Town02/Town02.umap")
    assert [instance["asset"] for instance in town01["instances"]] == ["Road_T1", "Marking_T1"]
    assert [instance["asset"] for instance in town02["instances"]] == ["SM_House_T2", "Terrain_T2"]
    assert town01["instances"][0]["materials"] == {"0": settings.road_material}
    assert all(instance["materials"] == {} for instance in town02["instances"])
    assert not (settings.effective_output_directory / MAP_PATHS_FILENAME).exists()


def test_prepare_maps_rerun_skips_existing_packages(
    settings: CookPrepSettings, repository: InMemoryAssetRepository, write_manifest
) -> None:
    write_manifest("Town", TOWN_MANIFEST)
    orchestrator = Orchestrator(settings=settings, repository=repository)
    params = OperatingParams.parse("PackageName=Town OnlyPrepareMaps=true")

    orchestrator.run(params)
    orchestrator.run(params)

    assert orchestrator.last_summary is not None
    assert orchestrator.last_summary.maps_saved == []
    assert orchestrator.last_summary.maps_skipped == ["Town01", "Town02"]


def test_move_meshes_takes_precedence(
    settings: CookPrepSettings, repository: InMemoryAssetRepository, write_manifest
) -> None:
    write_manifest("Town", TOWN_MANIFEST)
    repository.add_asset("/Game/Town/Maps/Town01", "Road_A")
    repository.add_asset("/Game/Town/Maps/Town02", "Terrain_B")
    orchestrator = Orchestrator(settings=settings, repository=repository)

    status = orchestrator.run(OperatingParams.parse("PackageName=Town OnlyPrepareMaps=true OnlyMoveMeshes=true"))

    assert status == 0
    assert repository.moves == [
        ("Road_A", "/Game/Town/Static/Roads/Town01"),
        ("Terrain_B", "/Game/Town/Static/Vegetation/Town02"),
    ]
    assert repository.saved == {}
    assert orchestrator.last_summary is not None
    assert orchestrator.last_summary.assets_moved == 2


def test_missing_base_map_makes_prepare_maps_a_no_op(
    settings: CookPrepSettings, content_directory: Path, write_manifest
) -> None:
    write_manifest("Town", TOWN_MANIFEST)
    repository = InMemoryAssetRepository(content_directory=content_directory)

    status = Orchestrator(settings=settings, repository=repository).run(
        OperatingParams.parse("PackageName=Town OnlyPrepareMaps=true")
    )

    assert status == 0
    assert repository.saved == {}


class _FailingRepository(InMemoryAssetRepository):
    def load(self, ref: AssetRef):
        if ref.name.startswith("Broken"):
            raise AssetRepositoryError(f"cannot load {ref.name}")
        return super().load(ref)


def test_repository_failure_skips_only_that_map(
    settings: CookPrepSettings, content_directory: Path, write_manifest
) -> None:
    write_manifest("Town", TOWN_MANIFEST)
    repository = _FailingRepository(content_directory=content_directory)
    repository.add_asset("/Game/Carla/Maps/BaseMap", "BaseMap")
    repository.add_asset("/Game/Town/Static/Other/Town01", "SM_Fine")
    repository.add_asset("/Game/Town/Static/Other/Town01", "Broken_Mesh")
    repository.add_asset("/Game/Town/Static/Other/Town02", "SM_Fine2")
    orchestrator = Orchestrator(settings=settings, repository=repository)

    status = orchestrator.run(OperatingParams.parse("PackageName=Town OnlyPrepareMaps=true"))

    assert status == 0
    assert orchestrator.last_summary is not None
    assert orchestrator.last_summary.maps_failed == ["Town01"]
    town02 = _saved(content_directory, "Town/Maps/Town02/Town02.umap")
    assert [instance["asset"] for instance in town02["instances"]] == ["SM_Fine2"]


def test_prop_folder_strips_asset_name() -> None:
    assert prop_folder("/Game/Town/Static/Props/Bench/SM_Bench") == "/Game/Town/Static/Props/Bench"
    assert prop_folder("SM_Bench") == "SM_Bench"


def test_map_without_path_is_recorded_as_failed(
    settings: CookPrepSettings, repository: InMemoryAssetRepository, content_directory: Path, write_manifest
) -> None:
    write_manifest(
        "Town",
        {"maps": [{"name": "Town01"}, {"name": "Town02", "path": "/Game/Town/Maps/Town02"}]},
    )
    orchestrator = Orchestrator(settings=settings, repository=repository)

    status = orchestrator.run(OperatingParams.parse("PackageName=Town OnlyPrepareMaps=true"))

    assert status == 0
    assert orchestrator.last_summary is not None
    assert orchestrator.last_summary.maps_failed == ["Town01"]
    assert orchestrator.last_summary.maps_saved == ["Town02"]
    assert (content_directory / "Town/Maps/Town02/Town02.umap").is_file()


def test_props_outside_game_root_are_skipped(
    settings: CookPrepSettings, repository: InMemoryAssetRepository, content_directory: Path, write_manifest
) -> None:
    write_manifest(
        "Town",
        {"props": [{"path": "Town/Props/SM_Bench"}, {"path": "/Game/Town/Static/Props/Lamp/SM_Lamp"}]},
    )
    repository.add_asset("/Game/Town/Static/Props/Lamp", "SM_Lamp")
    orchestrator = Orchestrator(settings=settings, repository=repository)

    assert orchestrator.run(OperatingParams.parse("PackageName=Town")) == 0

    assert orchestrator.last_summary is not None
    assert orchestrator.last_summary.props_skipped == ["Town/Props/SM_Bench"]
    props_map = _saved(content_directory, "Town/Maps/PropsMap.umap")
    assert [instance["asset"] for instance in props_map["instances"]] == ["SM_Lamp"]
