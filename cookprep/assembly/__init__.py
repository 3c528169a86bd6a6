"""Mini README: Scene assembly subsystem.

Spawns classified assets into the working scene and tracks the spawned
instances so they can be removed before the scene is reused.
"""

from .assembler import (
    DEFAULT_TRANSFORM,
    AssemblyContext,
    SceneAssembler,
    SpawnedInstanceSet,
    default_transform,
)

__all__ = [
    "AssemblyContext",
    "DEFAULT_TRANSFORM",
    "SceneAssembler",
    "SpawnedInstanceSet",
    "default_transform",
]
