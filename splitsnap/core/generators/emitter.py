"""
Code emitter capability.

Translates one schema element into model-builder statements. The split
generators only call the three CodeEmitter methods and never inspect the
text they produce.

PythonCodeEmitter targets the builder API in splitsnap.runtime.
"""
from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from splitsnap.core.schema_model import EntityDescriptor, SequenceDescriptor

from .writer import IndentedWriter


@runtime_checkable
class CodeEmitter(Protocol):
    def emit_entity_shape(
        self,
        builder_name: str,
        entity: EntityDescriptor,
        output: IndentedWriter,
    ) -> None:
        ...

    def emit_annotations(
        self,
        builder_name: str,
        target: Any,
        output: IndentedWriter,
        annotations: Mapping[str, Any],
        chained: bool = False,
        leading_blank_line: bool = False,
    ) -> None:
        ...

    def emit_sequence(
        self,
        builder_name: str,
        sequence: SequenceDescriptor,
        output: IndentedWriter,
    ) -> None:
        ...


def _call(*positional: Any, **keywords: Any) -> str:
    # Keyword arguments set to None are omitted so defaults stay implicit.
    parts = [repr(p) for p in positional]
    parts.extend(f"{k}={v!r}" for k, v in keywords.items() if v is not None)
    return ", ".join(parts)


class PythonCodeEmitter:
    def emit_entity_shape(
        self,
        builder_name: str,
        entity: EntityDescriptor,
        output: IndentedWriter,
    ) -> None:
        self._emit_block(f"{builder_name}.entity({entity.name!r})", entity, output, depth=0)

    def emit_annotations(
        self,
        builder_name: str,
        target: Any,
        output: IndentedWriter,
        annotations: Mapping[str, Any],
        chained: bool = False,
        leading_blank_line: bool = False,
    ) -> None:
        if not annotations:
            return

        if leading_blank_line:
            output.line()

        # chained lines continue an expression the caller has opened
        prefix = "" if chained else builder_name
        for key, value in annotations.items():
            output.line(f"{prefix}.has_annotation({_call(key, value)})")

    def emit_sequence(
        self,
        builder_name: str,
        sequence: SequenceDescriptor,
        output: IndentedWriter,
    ) -> None:
        args = _call(
            sequence.name,
            clr_type=None if sequence.clr_type == "int" else sequence.clr_type,
            schema=sequence.schema_name,
            start_value=None if sequence.start_value == 1 else sequence.start_value,
            increment_by=None if sequence.increment_by == 1 else sequence.increment_by,
            min_value=sequence.min_value,
            max_value=sequence.max_value,
            cyclic=True if sequence.cyclic else None,
        )
        output.line(f"{builder_name}.has_sequence({args})")

    # ------------------------------------------------------------------
    # Entity blocks
    # ------------------------------------------------------------------
    def _emit_block(
        self,
        opener: str,
        entity: EntityDescriptor,
        output: IndentedWriter,
        depth: int,
    ) -> None:
        var = "b" if depth == 0 else f"b{depth}"
        output.line(f"with {opener} as {var}:")
        with output.indent():
            before = output.line_count
            self._emit_body(var, entity, output, depth)
            if output.line_count == before:
                output.line("pass")

    def _emit_body(
        self,
        var: str,
        entity: EntityDescriptor,
        output: IndentedWriter,
        depth: int,
    ) -> None:
        for p in entity.properties:
            args = _call(
                p.name,
                p.clr_type,
                nullable=None if p.nullable else False,
                max_length=p.max_length,
                column_name=p.column_name,
                annotations=dict(p.annotations) or None,
            )
            output.line(f"{var}.property({args})")

        for k in entity.keys:
            output.line(f"{var}.has_key({_call(*k.properties, name=k.name)})")

        for ix in entity.indexes:
            args = _call(*ix.properties, unique=True if ix.unique else None, name=ix.name)
            output.line(f"{var}.has_index({args})")

        if entity.table or entity.schema_name:
            output.line(f"{var}.to_table({_call(entity.table or entity.name, schema=entity.schema_name)})")

        for r in entity.relationships:
            args = _call(
                r.principal,
                foreign_key=list(r.foreign_key),
                navigation=r.navigation,
                inverse_navigation=r.inverse_navigation,
                on_delete=None if r.on_delete == "cascade" else r.on_delete,
                required=True if r.required else None,
            )
            output.line(f"{var}.has_relationship({args})")

        for o in entity.ownerships:
            method = "owns_many" if o.many else "owns_one"
            self._emit_block(
                f"{var}.{method}({_call(o.entity.name, o.navigation)})",
                o.entity,
                output,
                depth=depth + 1,
            )

        self.emit_annotations(var, entity, output, entity.annotations)
