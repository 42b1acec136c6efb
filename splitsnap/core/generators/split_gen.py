from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from splitsnap.core.errors import IdentifierCollision, require
from splitsnap.core.naming import identifier_for
from splitsnap.core.schema_model import EntityDescriptor, SchemaModel

from .emitter import CodeEmitter, PythonCodeEmitter
from .entity_gen import emit_entity_unit
from .orchestrator_gen import emit_orchestrator_unit


class ArtifactRole(str, Enum):
    ORCHESTRATOR = "orchestrator"
    ENTITY_UNIT = "entity_unit"


@dataclass(frozen=True)
class Artifact:
    identifier: str
    content: str
    role: ArtifactRole

    def file_name(self, file_extension: str) -> str:
        return f"{self.identifier}{file_extension}"


def _check_collisions(named: List[Tuple[str, EntityDescriptor]]) -> None:
    # Case-insensitive: identifiers differing only by case collide on
    # case-insensitive filesystems.
    seen: Dict[str, str] = {}
    for identifier, entity in named:
        key = identifier.casefold()
        if key in seen:
            raise IdentifierCollision(identifier, [seen[key], entity.name])
        seen[key] = entity.name


def split_snapshots(
    namespace: Optional[str],
    owner_type: Union[type, str],
    snapshot_name: str,
    model: SchemaModel,
    *,
    emitter: Optional[CodeEmitter] = None,
) -> Tuple[Artifact, ...]:
    """
    Split one model snapshot into an orchestrator plus one unit per
    non-owned entity.

    Returns:
      (orchestrator, <entity units in model order>...)

    Pure: no I/O, same model -> same artifacts.
    """
    require(owner_type, "owner_type")
    require(snapshot_name, "snapshot_name")
    require(model, "model")

    ns = namespace or ""
    emitter = emitter or PythonCodeEmitter()

    named = [(identifier_for(e), e) for e in model.non_owned_entities()]
    _check_collisions(named)

    units = [
        Artifact(
            identifier=identifier,
            content=emit_entity_unit(ns, owner_type, identifier, entity, emitter=emitter),
            role=ArtifactRole.ENTITY_UNIT,
        )
        for identifier, entity in named
    ]

    orchestrator = Artifact(
        identifier=snapshot_name,
        content=emit_orchestrator_unit(ns, owner_type, snapshot_name, model, emitter=emitter),
        role=ArtifactRole.ORCHESTRATOR,
    )

    return (orchestrator, *units)
