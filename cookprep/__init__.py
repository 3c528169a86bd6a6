"""Mini README: Core package initializer for cookprep.

cookprep prepares imported map geometry and props for the cook step: it
reads a package manifest, sorts meshes into semantic folders by name, spawns
them into a base world and saves one map package per declared map.

Most callers only need ``Orchestrator`` and ``OperatingParams``; the
subpackages expose the individual stages for reuse and testing.
"""

from .logging_utils import get_logger
from .orchestration import OperatingParams, Orchestrator

__all__ = ["OperatingParams", "Orchestrator", "get_logger"]
