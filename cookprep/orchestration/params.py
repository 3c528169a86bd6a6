"""Mini README: Parsing of the free-form ``Key=Value`` command parameters.

``PackageName=Town OnlyPrepareMaps=true`` style strings are split on
whitespace (quotes respected); keys match case-insensitively and unknown keys
are ignored. Boolean values accept the usual spellings; anything else leaves
the flag at its default.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import Dict, Optional

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def parse_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    return default


def parse_key_values(params: str) -> Dict[str, str]:
    """Return ``{key.lower(): value}`` for every ``key=value`` token."""

    values: Dict[str, str] = {}
    for token in shlex.split(params):
        key, separator, value = token.lstrip("-").partition("=")
        if separator:
            values.setdefault(key.lower(), value)
    return values


@dataclass(frozen=True, slots=True)
class OperatingParams:
    """Options selecting the run mode."""

    package_name: str = ""
    only_prepare_maps: bool = False
    only_move_meshes: bool = False

    @classmethod
    def parse(cls, params: str) -> "OperatingParams":
        values = parse_key_values(params)
        return cls(
            package_name=values.get("packagename", ""),
            only_prepare_maps=parse_bool(values.get("onlypreparemaps")),
            only_move_meshes=parse_bool(values.get("onlymovemeshes")),
        )

    @property
    def mode(self) -> str:
        if self.only_move_meshes:
            return "move-meshes"
        if self.only_prepare_maps:
            return "prepare-maps"
        return "full-prepare"
