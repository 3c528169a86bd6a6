"""Mini README: Name-based semantic classification of imported assets.

Structure:
    * SemanticCategory - the four destination buckets (also folder names).
    * MaterialOverride - material slots applied to a spawned instance.
    * ClassificationRule - one ordered substring rule.
    * SPAWN_RULES / RELOCATION_RULES - the two independent rule tables.
    * AssetClassifier - evaluates the tables against asset names.

Asset names come from an external authoring tool whose vocabulary differs
from ours ("Marking", "Terrain"). The rules bridge the two by plain,
case-sensitive substring checks evaluated top to bottom, first match wins.

The two tables deliberately check "Road" and "Marking" in opposite order:
``RoadMarking_01`` receives marking materials when spawned but is moved into
the ``Roads`` folder during relocation. Keep them separate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MARKING_TOKEN = "Marking"
ROAD_TOKEN = "Road"
TERRAIN_TOKEN = "Terrain"


class SemanticCategory(str, Enum):
    """Semantic segmentation buckets; values double as folder names."""

    OTHER = "Other"
    ROAD = "Roads"
    ROAD_LINES = "RoadLines"
    VEGETATION = "Vegetation"

    @classmethod
    def folder_order(cls) -> Tuple["SemanticCategory", ...]:
        return (cls.OTHER, cls.ROAD, cls.ROAD_LINES, cls.VEGETATION)


class MaterialKind(str, Enum):
    """Material families assigned while spawning map geometry."""

    MARKING = "marking"
    ROAD = "road"
    TERRAIN = "terrain"


@dataclass(frozen=True, slots=True)
class MaterialOverride:
    """Materials to apply, keyed by material slot index."""

    kind: MaterialKind
    slots: Dict[int, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    """Substring rule mapping a token to a category and optional material."""

    token: str
    category: SemanticCategory
    material: Optional[MaterialKind] = None

    def matches(self, name: str) -> bool:
        return self.token in name


SPAWN_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(MARKING_TOKEN, SemanticCategory.ROAD_LINES, MaterialKind.MARKING),
    ClassificationRule(ROAD_TOKEN, SemanticCategory.ROAD, MaterialKind.ROAD),
    ClassificationRule(TERRAIN_TOKEN, SemanticCategory.VEGETATION, MaterialKind.TERRAIN),
)

RELOCATION_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(ROAD_TOKEN, SemanticCategory.ROAD),
    ClassificationRule(MARKING_TOKEN, SemanticCategory.ROAD_LINES),
    ClassificationRule(TERRAIN_TOKEN, SemanticCategory.VEGETATION),
)


def first_match(name: str, rules: Sequence[ClassificationRule]) -> Optional[ClassificationRule]:
    """Return the first rule whose token occurs in ``name``."""

    for rule in rules:
        if rule.matches(name):
            return rule
    return None


class AssetClassifier:
    """Assign semantic categories and spawn materials from asset names."""

    def __init__(
        self,
        *,
        marking_materials: Sequence[str] = (),
        road_material: Optional[str] = None,
        terrain_material: Optional[str] = None,
        spawn_rules: Sequence[ClassificationRule] = SPAWN_RULES,
        relocation_rules: Sequence[ClassificationRule] = RELOCATION_RULES,
    ) -> None:
        self.spawn_rules = tuple(spawn_rules)
        self.relocation_rules = tuple(relocation_rules)
        self._materials: Dict[MaterialKind, Dict[int, str]] = {
            MaterialKind.MARKING: dict(enumerate(marking_materials)),
            MaterialKind.ROAD: {0: road_material} if road_material else {},
            MaterialKind.TERRAIN: {0: terrain_material} if terrain_material else {},
        }
        LOGGER.debug("AssetClassifier initialised with materials: %s", self._materials)

    @classmethod
    def from_settings(cls, settings) -> "AssetClassifier":
        """Build a classifier using the material paths from ``settings``."""

        return cls(
            marking_materials=(settings.marking_material_white, settings.marking_material_yellow),
            road_material=settings.road_material,
            terrain_material=settings.terrain_material,
        )

    def classify(self, name: str, *, for_spawn_phase: bool = False) -> SemanticCategory:
        """Return the category of ``name`` under the spawn or relocation rules."""

        rules = self.spawn_rules if for_spawn_phase else self.relocation_rules
        rule = first_match(name, rules)
        return rule.category if rule else SemanticCategory.OTHER

    def material_override(self, name: str) -> Optional[MaterialOverride]:
        """Materials to apply when spawning ``name``; ``None`` keeps the asset's own."""

        rule = first_match(name, self.spawn_rules)
        if rule is None or rule.material is None:
            return None
        return MaterialOverride(kind=rule.material, slots=dict(self._materials[rule.material]))
