"""
Default code emitter tests.
"""
from __future__ import annotations

import ast

from splitsnap.core.generators.emitter import CodeEmitter, PythonCodeEmitter
from splitsnap.core.generators.writer import IndentedWriter
from splitsnap.core.schema_model import EntityDescriptor, SequenceDescriptor


def _emit_entity(entity) -> str:
    out = IndentedWriter()
    PythonCodeEmitter().emit_entity_shape("model_builder", entity, out)
    return out.getvalue()


def test_default_emitter_satisfies_protocol():
    assert isinstance(PythonCodeEmitter(), CodeEmitter)


def test_entity_block_is_valid_python(make_entity):
    code = _emit_entity(make_entity("User"))
    ast.parse(code)
    assert code.startswith("with model_builder.entity('Shop.Models.User') as b:")
    assert "b.property('Id', 'int', nullable=False)" in code
    assert "b.property('Name', 'str', max_length=100)" in code
    assert "b.has_key('Id')" in code
    assert "b.to_table('Users')" in code


def test_owned_entities_nest_with_distinct_builder(shop_model):
    user = shop_model.entities[0]
    code = _emit_entity(user)
    ast.parse(code)
    assert "with b.owns_one('Shop.Models.Address', 'Address') as b1:" in code
    assert "b1.property('Street', 'str')" in code


def test_entity_without_members_gets_pass():
    code = _emit_entity(EntityDescriptor(name="Empty"))
    assert code.splitlines() == ["with model_builder.entity('Empty') as b:", "    pass"]


def test_annotations_in_mapping_order():
    out = IndentedWriter()
    PythonCodeEmitter().emit_annotations("mb", None, out, {"b": 1, "a": "x"})
    assert out.getvalue().splitlines() == ["mb.has_annotation('b', 1)", "mb.has_annotation('a', 'x')"]


def test_chained_annotations_and_leading_blank_line():
    out = IndentedWriter()
    PythonCodeEmitter().emit_annotations("mb", None, out, {"k": True}, chained=True, leading_blank_line=True)
    assert out.getvalue().splitlines() == ["", ".has_annotation('k', True)"]


def test_no_annotations_emits_nothing():
    out = IndentedWriter()
    PythonCodeEmitter().emit_annotations("mb", None, out, {}, leading_blank_line=True)
    assert out.empty


def test_sequence_defaults_are_implicit():
    out = IndentedWriter()
    PythonCodeEmitter().emit_sequence("mb", SequenceDescriptor(name="Seq"), out)
    assert out.getvalue() == "mb.has_sequence('Seq')"


def test_sequence_options():
    out = IndentedWriter()
    seq = SequenceDescriptor(name="Seq", schema_name="dbo", clr_type="long", start_value=10, cyclic=True)
    PythonCodeEmitter().emit_sequence("mb", seq, out)
    assert out.getvalue() == "mb.has_sequence('Seq', clr_type='long', schema='dbo', start_value=10, cyclic=True)"
