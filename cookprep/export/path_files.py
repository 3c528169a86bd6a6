"""Mini README: Side-channel path files consumed by the cook stage.

Structure:
    * PathFileEmitter - writes ``MapPaths.txt`` and ``PackagePath.txt``.

Both files are recomputed from the manifest and overwritten on every full
preparation run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..logging_utils import get_logger
from ..manifest import ManifestReader, PackageManifest

LOGGER = get_logger(__name__)

MAP_PATHS_FILENAME = "MapPaths.txt"
PACKAGE_PATH_FILENAME = "PackagePath.txt"
MAP_PATH_DELIMITER = "+"


def save_text(directory: Path, filename: str, text: str, *, allow_overwriting: bool = True) -> Path:
    """Write ``text`` to ``directory/filename``, creating the directory first."""

    directory.mkdir(parents=True, exist_ok=True)
    target = directory / filename
    if allow_overwriting or not target.exists():
        target.write_text(text, encoding="utf-8")
    return target


class PathFileEmitter:
    """Write the map and package path files into the output directory."""

    def __init__(self, output_directory: Path, manifest_reader: Optional[ManifestReader] = None) -> None:
        self.output_directory = Path(output_directory)
        self.manifest_reader = manifest_reader

    @staticmethod
    def map_paths_text(manifest: PackageManifest, props_map_path: str = "") -> str:
        """``path/name`` of every map joined by ``+``."""

        text = "".join(f"{entry.path}/{entry.name}{MAP_PATH_DELIMITER}" for entry in manifest.maps)
        # Only an empty props map path is appended, so the props map never lands here.
        if not props_map_path:
            text += props_map_path
        return text.removesuffix(MAP_PATH_DELIMITER)

    def write_map_paths_file(self, manifest: PackageManifest, props_map_path: str = "") -> Path:
        text = self.map_paths_text(manifest, props_map_path)
        target = save_text(self.output_directory, MAP_PATHS_FILENAME, text)
        LOGGER.info("Wrote %s (%s maps)", target, len(manifest.maps))
        return target

    def write_package_path_file(self, package_name: str) -> Path:
        """Record the absolute manifest path, or an empty file when none exists."""

        manifest_path = None
        if self.manifest_reader is not None:
            manifest_path = self.manifest_reader.find_manifest_path(package_name)
        target = save_text(self.output_directory, PACKAGE_PATH_FILENAME, str(manifest_path or ""))
        LOGGER.info("Wrote %s -> %s", target, manifest_path)
        return target
