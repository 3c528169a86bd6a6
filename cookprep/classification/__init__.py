"""Mini README: Asset classification subsystem.

Exports the semantic categories, the ordered rule tables and the
``AssetClassifier`` used by both the spawn and relocation phases.
"""

from .classifier import (
    RELOCATION_RULES,
    SPAWN_RULES,
    AssetClassifier,
    ClassificationRule,
    MaterialKind,
    MaterialOverride,
    SemanticCategory,
)

__all__ = [
    "AssetClassifier",
    "ClassificationRule",
    "MaterialKind",
    "MaterialOverride",
    "RELOCATION_RULES",
    "SPAWN_RULES",
    "SemanticCategory",
]
