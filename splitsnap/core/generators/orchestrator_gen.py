from __future__ import annotations

from typing import Any, Dict, Optional, Union

from splitsnap.core.errors import InvalidArgument, require
from splitsnap.core.naming import identifier_for
from splitsnap.core.schema_model import SchemaModel

from .emitter import CodeEmitter, PythonCodeEmitter
from .rendering import BUILDER_NAME, render, type_reference
from .writer import IndentedWriter

PRODUCT_VERSION_ANNOTATION = "ProductVersion"


def model_annotations(model: SchemaModel) -> Dict[str, Any]:
    """Model annotations with the producer version injected last (it wins)."""
    annotations = dict(model.annotations)
    if model.product_version:
        annotations[PRODUCT_VERSION_ANNOTATION] = model.product_version
    return annotations


def emit_orchestrator_unit(
    namespace: str,
    owner_type: Union[type, str],
    snapshot_name: str,
    model: SchemaModel,
    *,
    emitter: Optional[CodeEmitter] = None,
) -> str:
    """
    Render the top-level snapshot.

    Statement order is fixed: model annotations, sequences, then one
    invocation per non-owned entity in model order.
    """
    require(namespace, "namespace")
    require(owner_type, "owner_type")
    require(snapshot_name, "snapshot_name")
    require(model, "model")
    if not snapshot_name.isidentifier():
        raise InvalidArgument("snapshot_name", f"snapshot name {snapshot_name!r} is not a valid class name")

    emitter = emitter or PythonCodeEmitter()
    body = IndentedWriter()

    emitter.emit_annotations(
        BUILDER_NAME,
        model,
        body,
        model_annotations(model),
        chained=False,
        leading_blank_line=False,
    )

    if model.sequences:
        if not body.empty:
            body.line()
        for sequence in model.sequences:
            emitter.emit_sequence(BUILDER_NAME, sequence, body)

    entities = model.non_owned_entities()
    if entities:
        if not body.empty:
            body.line()
        body.line("# Entity snapshots")
        for entity in entities:
            body.line(f"load_unit(__file__, {identifier_for(entity)!r}).build_model({BUILDER_NAME})")

    if body.empty:
        body.line("pass")

    return render(
        "snapshot/orchestrator.py.j2",
        snapshot_name=snapshot_name,
        namespace=namespace,
        context=type_reference(owner_type),
        body=body.getvalue(),
    )
