"""
Orchestrator snapshot generator tests.
"""
from __future__ import annotations

import ast

import pytest

from splitsnap.core.errors import InvalidArgument
from splitsnap.core.generators.orchestrator_gen import emit_orchestrator_unit, model_annotations
from splitsnap.core.schema_model import SchemaModel

SNAPSHOT_NAME = "ShopContextModelSnapshot"


def _orchestrator(model, namespace="Shop.Migrations", owner="shop.db.ShopContext", name=SNAPSHOT_NAME) -> str:
    return emit_orchestrator_unit(namespace, owner, name, model)


def _build_model_body(code: str) -> list:
    lines = code.splitlines()
    start = lines.index('        """Builds the complete model by invoking entity snapshots."""') + 1
    return [ln[8:] if ln else ln for ln in lines[start:]]


def test_orchestrator_is_valid_python(shop_model):
    code = _orchestrator(shop_model)
    tree = ast.parse(code)
    classes = [n for n in tree.body if isinstance(n, ast.ClassDef)]
    assert [c.name for c in classes] == [SNAPSHOT_NAME]
    assert classes[0].bases[0].id == "ModelSnapshot"


def test_statement_order(shop_model):
    body = _build_model_body(_orchestrator(shop_model))
    assert body == [
        "model_builder.has_annotation('Relational:MaxIdentifierLength', 128)",
        "model_builder.has_annotation('ProductVersion', '1.4.0')",
        "",
        "model_builder.has_sequence('OrderNumbers', start_value=1000, increment_by=5)",
        "",
        "# Entity snapshots",
        "load_unit(__file__, 'UserSnapshot').build_model(model_builder)",
        "load_unit(__file__, 'OrderSnapshot').build_model(model_builder)",
    ]


def test_owned_entities_are_not_invoked(shop_model):
    code = _orchestrator(shop_model)
    assert "AddressSnapshot" not in code


def test_product_version_overrides_model_annotation():
    model = SchemaModel(annotations={"ProductVersion": "0.1", "A": 1}, product_version="2.0")
    assert model_annotations(model) == {"ProductVersion": "2.0", "A": 1}


def test_no_product_version_means_no_injection():
    assert model_annotations(SchemaModel(annotations={"A": 1})) == {"A": 1}


def test_empty_model_is_still_valid_python():
    code = _orchestrator(SchemaModel())
    ast.parse(code)
    assert _build_model_body(code) == ["pass"]


def test_entities_only_has_no_leading_blank_line(make_entity):
    body = _build_model_body(_orchestrator(SchemaModel(entities=[make_entity("User")])))
    assert body[0] == "# Entity snapshots"


def test_context_and_namespace():
    code = _orchestrator(SchemaModel(), namespace="")
    assert "__snapshot_namespace__ = ''" in code
    assert "    context = 'shop.db.ShopContext'" in code


def test_invalid_class_name_rejected():
    with pytest.raises(InvalidArgument):
        _orchestrator(SchemaModel(), name="not a class")


@pytest.mark.parametrize("missing", ["namespace", "owner", "name", "model"])
def test_missing_argument_raises(missing):
    args = dict(namespace="ns", owner="ctx", name=SNAPSHOT_NAME, model=SchemaModel())
    args[missing] = None
    with pytest.raises(InvalidArgument):
        emit_orchestrator_unit(args["namespace"], args["owner"], args["name"], args["model"])
