"""Mini README: Package manifest discovery and parsing.

Structure:
    * MapEntry / PackageManifest - typed view of a package's declared content.
    * MapRecord / PropRecord / ManifestDocument - pydantic models for the
      on-disk JSON document.
    * ManifestReader - locates ``<Package>.Package.json`` and parses it.

A missing or unreadable manifest is never fatal: the reader hands back an
empty manifest so that every mode degrades to a no-op.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MANIFEST_SUFFIX = ".Package.json"

RecordT = TypeVar("RecordT", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class MapEntry:
    """One map declared by the manifest."""

    name: str
    path: str
    use_category_materials: bool = False

    @property
    def package_path(self) -> str:
        return f"{self.path}/{self.name}"


@dataclass(frozen=True, slots=True)
class PackageManifest:
    """Maps and props declared for a package."""

    maps: List[MapEntry] = field(default_factory=list)
    prop_paths: List[str] = field(default_factory=list)
    source: Optional[Path] = None

    @property
    def is_empty(self) -> bool:
        return not self.maps and not self.prop_paths

    @property
    def map_names(self) -> List[str]:
        return [entry.name for entry in self.maps]


class MapRecord(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = ""
    path: str = ""
    use_carla_materials: bool = False


class PropRecord(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    path: str = ""


class ManifestDocument(BaseModel):
    """Schema of ``<Package>.Package.json``.

    Records are validated one by one so a single bad entry is dropped
    without emptying the rest of the package.
    """

    maps: List[Any] = Field(default_factory=list)
    props: List[Any] = Field(default_factory=list)

    def to_manifest(self, source: Optional[Path] = None) -> PackageManifest:
        maps = [
            MapEntry(name=record.name, path=record.path, use_category_materials=record.use_carla_materials)
            for record in _valid_records(MapRecord, self.maps)
        ]
        props = [record.path for record in _valid_records(PropRecord, self.props)]
        return PackageManifest(maps=maps, prop_paths=props, source=source)


def _valid_records(model: Type[RecordT], raw_records: List[Any]) -> List[RecordT]:
    records: List[RecordT] = []
    for index, raw in enumerate(raw_records):
        try:
            records.append(model.model_validate(raw))
        except ValidationError as error:
            LOGGER.warning("Skipping %s #%s: %s", model.__name__, index, error)
    return records


class ManifestReader:
    """Find and parse package manifests below the content directory."""

    def __init__(self, content_directory: Path) -> None:
        self.content_directory = Path(content_directory)

    def find_manifest_path(self, package_name: str) -> Optional[Path]:
        """Return the absolute path of the first ``<package>.Package.json`` found."""

        target = f"{package_name}{MANIFEST_SUFFIX}"
        if self.content_directory.is_dir():
            for directory, _subdirectories, filenames in os.walk(self.content_directory):
                if target in filenames:
                    return (Path(directory) / target).resolve()
        LOGGER.error("Package manifest %s not found under %s", target, self.content_directory)
        return None

    def read(self, package_name: str) -> PackageManifest:
        """Parse the package manifest, returning an empty manifest on any failure."""

        manifest_path = self.find_manifest_path(package_name)
        if manifest_path is None:
            return PackageManifest()

        try:
            text = manifest_path.read_text(encoding="utf-8")
        except OSError as error:
            LOGGER.error("Unable to read manifest %s: %s", manifest_path, error)
            return PackageManifest(source=manifest_path)

        try:
            document = ManifestDocument.model_validate_json(text)
        except ValidationError as error:
            LOGGER.debug("Manifest %s could not be parsed: %s", manifest_path, error)
            return PackageManifest(source=manifest_path)

        manifest = document.to_manifest(source=manifest_path)
        LOGGER.info(
            "Loaded manifest %s with %s maps and %s props",
            manifest_path,
            len(manifest.maps),
            len(manifest.prop_paths),
        )
        return manifest
