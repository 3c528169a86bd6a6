"""Mini README: Orchestration subsystem.

``params`` parses the ``Key=Value`` run options and ``orchestrator`` wires
the manifest reader, assembler, persister, relocator and path-file emitter
into the three run modes.
"""

from .orchestrator import PROPS_MAP_NAME, Orchestrator, RunSummary, prop_folder
from .params import OperatingParams, parse_bool

__all__ = [
    "OperatingParams",
    "Orchestrator",
    "PROPS_MAP_NAME",
    "RunSummary",
    "parse_bool",
    "prop_folder",
]
