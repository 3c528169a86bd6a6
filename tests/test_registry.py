"""Mini README: Tests for the asset repository provider registry.

Ensures the built-in providers register on import and that instantiation by
identifier works, giving a quick regression check for the plugin system.
"""

from pathlib import Path

import pytest

from cookprep.repository import REGISTRY, AssetRepository


def test_registry_contains_builtin_providers():
    assert list(REGISTRY.available_providers()) == ["local", "memory"]


def test_registry_instantiates_provider(tmp_path: Path):
    repository = REGISTRY.create("Memory", content_directory=tmp_path)
    assert isinstance(repository, AssetRepository)
    assert repository.provider_name == "memory"
    assert repository.metadata() == {"provider": "memory", "content_directory": str(tmp_path)}


def test_registry_rejects_unknown_provider():
    with pytest.raises(KeyError):
        REGISTRY.create("unreal")


def test_registry_passes_game_root(tmp_path: Path):
    repository = REGISTRY.create("local", content_directory=tmp_path, game_root="/Content/")
    assert repository.game_root == "/Content"
