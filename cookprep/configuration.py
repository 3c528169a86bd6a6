"""Mini README: Centralised configuration for the asset preparation batch.

Structure:
    * CookPrepSettings - pydantic-settings model describing the content layout.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values are read from ``COOKPREP_*`` environment variables or a local
    ``.env`` file. ``content_directory`` is the on-disk folder that backs the
    ``/Game`` logical root; manifests, road-network descriptors and saved map
    packages all live beneath it.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CookPrepSettings(BaseSettings):
    """Runtime configuration for a preparation run."""

    model_config = SettingsConfigDict(
        env_prefix="COOKPREP_",
        env_file=".env",
        case_sensitive=False,
    )

    content_directory: Path = Field(
        Path("Content"),
        description="File-system directory mapped to the logical game root.",
    )
    output_directory: Optional[Path] = Field(
        None,
        description="Directory receiving MapPaths.txt and PackagePath.txt. Defaults to the content directory.",
    )
    game_root: str = Field(
        "/Game",
        description="Logical root prefix of every asset package path.",
    )
    base_map_path: str = Field(
        "/Game/Carla/Maps/BaseMap",
        description="Folder holding the template world loaded at the start of each mode.",
    )
    repository: str = Field(
        "local",
        description="Identifier of the asset repository provider to use.",
    )
    package_extension: str = Field(
        ".umap",
        description="File extension appended to saved map packages.",
    )
    marking_material_white: str = Field(
        "/Game/Carla/Static/GenericMaterials/LaneMarking/M_MarkingLane_W.M_MarkingLane_W",
    )
    marking_material_yellow: str = Field(
        "/Game/Carla/Static/GenericMaterials/LaneMarking/M_MarkingLane_Y.M_MarkingLane_Y",
    )
    road_material: str = Field(
        "/Game/Carla/Static/GenericMaterials/Masters/LowComplexity/M_Road1.M_Road1",
    )
    terrain_material: str = Field(
        "/Game/Carla/Static/GenericMaterials/Grass/M_Grass01.M_Grass01",
    )
    log_level: str = Field("INFO", description="Root logging level for CLI runs.")

    @field_validator("content_directory", "output_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Optional[str | Path]) -> Optional[Path]:
        """Expand user directories and make configured paths absolute."""

        if value is None:
            return None
        return Path(value).expanduser().resolve()

    @field_validator("game_root", "base_map_path")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/") or "/"

    @property
    def effective_output_directory(self) -> Path:
        """Directory for side-channel path files."""

        return self.output_directory or self.content_directory


@lru_cache()
def get_settings() -> CookPrepSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return CookPrepSettings()
