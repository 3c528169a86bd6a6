"""Mini README: Shared fixtures for the cookprep test-suite.

Structure:
    * content_directory - temporary directory backing ``/Game``.
    * settings - settings pointing at the temporary content directory.
    * repository - in-memory repository seeded with a base map.
    * write_manifest - helper writing ``<Package>.Package.json`` files.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cookprep.configuration import CookPrepSettings
from cookprep.repository.providers import InMemoryAssetRepository

BASE_MAP_FOLDER = "/Game/Carla/Maps/BaseMap"


@pytest.fixture()
def content_directory(tmp_path: Path) -> Path:
    directory = tmp_path / "Content"
    directory.mkdir()
    return directory


@pytest.fixture()
def settings(content_directory: Path, tmp_path: Path) -> CookPrepSettings:
    return CookPrepSettings(
        content_directory=content_directory,
        output_directory=tmp_path / "output",
        repository="memory",
    )


@pytest.fixture()
def repository(content_directory: Path) -> InMemoryAssetRepository:
    repo = InMemoryAssetRepository(content_directory=content_directory)
    repo.add_asset(BASE_MAP_FOLDER, "BaseMap")
    return repo


@pytest.fixture()
def write_manifest(content_directory: Path):
    def _write(package_name: str, document, *, subdirectory: str = "") -> Path:
        folder = content_directory / package_name / subdirectory if subdirectory else content_directory / package_name
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / f"{package_name}.Package.json"
        text = document if isinstance(document, str) else json.dumps(document)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
