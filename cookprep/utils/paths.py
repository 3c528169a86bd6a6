"""Mini README: Helpers translating logical package paths to files.

Logical asset paths look like ``/Game/<Package>/Maps/<Map>``. The ``/Game``
root maps onto the configured content directory, mirroring how the scene
engine lays out packages on disk.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Optional

DEFAULT_GAME_ROOT = "/Game"


def relative_package_path(package_path: str, game_root: str = DEFAULT_GAME_ROOT) -> PurePosixPath:
    """Return ``package_path`` relative to the logical game root."""

    root = game_root.rstrip("/")
    if package_path != root and not package_path.startswith(root + "/"):
        raise ValueError(f"Package path '{package_path}' is not under '{root}'")
    return PurePosixPath(package_path[len(root):].lstrip("/"))


def package_path_to_filename(
    content_directory: Path,
    package_path: str,
    extension: str = "",
    *,
    game_root: str = DEFAULT_GAME_ROOT,
) -> Path:
    """Map a logical package path onto a file below ``content_directory``."""

    relative = relative_package_path(package_path, game_root)
    target = content_directory.joinpath(*relative.parts) if relative.parts else content_directory
    return target.with_name(target.name + extension) if extension else target


def filename_to_package_path(
    content_directory: Path,
    filename: Path,
    *,
    game_root: str = DEFAULT_GAME_ROOT,
) -> Optional[str]:
    """Inverse of ``package_path_to_filename`` with the suffix removed."""

    try:
        relative = filename.with_suffix("").relative_to(content_directory)
    except ValueError:
        return None
    return "/".join([game_root.rstrip("/"), *relative.parts])
