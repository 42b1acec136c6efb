from .emitter import CodeEmitter, PythonCodeEmitter
from .entity_gen import emit_entity_unit
from .orchestrator_gen import emit_orchestrator_unit
from .split_gen import Artifact, ArtifactRole, split_snapshots

__all__ = [
    "Artifact",
    "ArtifactRole",
    "CodeEmitter",
    "PythonCodeEmitter",
    "emit_entity_unit",
    "emit_orchestrator_unit",
    "split_snapshots",
]
