from __future__ import annotations

from typing import Optional, Union

from splitsnap.core.errors import require
from splitsnap.core.schema_model import EntityDescriptor

from .emitter import CodeEmitter, PythonCodeEmitter
from .rendering import BUILDER_NAME, join_namespace, render, type_reference
from .writer import IndentedWriter

SNAPSHOTS_NAMESPACE = "Snapshots"


def emit_entity_unit(
    namespace: str,
    owner_type: Union[type, str],
    identifier: str,
    entity: EntityDescriptor,
    *,
    emitter: Optional[CodeEmitter] = None,
) -> str:
    """
    Render the snapshot unit for one non-owned entity.

    The unit exposes a single build_model(model_builder) entry point whose
    body is produced by the code emitter; owned entities are emitted inside
    it by the emitter.
    """
    require(namespace, "namespace")
    require(owner_type, "owner_type")
    require(identifier, "identifier")
    require(entity, "entity")

    emitter = emitter or PythonCodeEmitter()

    body = IndentedWriter()
    emitter.emit_entity_shape(BUILDER_NAME, entity, body)
    if body.empty:
        body.line("pass")

    return render(
        "snapshot/entity_unit.py.j2",
        display_name=entity.display_name,
        namespace=join_namespace(namespace, SNAPSHOTS_NAMESPACE),
        context=type_reference(owner_type),
        identifier=identifier,
        body=body.getvalue(),
    )
