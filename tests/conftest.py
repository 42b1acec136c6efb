from __future__ import annotations

import pytest

from splitsnap.core.observability.metrics import reset_metrics
from splitsnap.core.schema_model import (
    EntityDescriptor,
    IndexSpec,
    KeySpec,
    OwnershipSpec,
    PropertySpec,
    RelationshipSpec,
    SchemaModel,
    SequenceDescriptor,
)


@pytest.fixture(autouse=True)
def _reset_named_metrics():
    reset_metrics()
    yield
    reset_metrics()


def _make_entity(type_name: str, **overrides) -> EntityDescriptor:
    defaults = dict(
        name=f"Shop.Models.{type_name}",
        type_name=type_name,
        table=f"{type_name}s",
        properties=[
            PropertySpec(name="Id", clr_type="int", nullable=False),
            PropertySpec(name="Name", clr_type="str", max_length=100),
        ],
        keys=[KeySpec(properties=["Id"])],
    )
    defaults.update(overrides)
    return EntityDescriptor(**defaults)


@pytest.fixture()
def make_entity():
    return _make_entity


@pytest.fixture()
def address_entity() -> EntityDescriptor:
    return EntityDescriptor(
        name="Shop.Models.Address",
        type_name="Address",
        owned=True,
        owner="Shop.Models.User",
        properties=[
            PropertySpec(name="Street", clr_type="str"),
            PropertySpec(name="City", clr_type="str"),
        ],
    )


@pytest.fixture()
def shop_model(address_entity) -> SchemaModel:
    user = _make_entity(
        "User",
        indexes=[IndexSpec(properties=["Name"], unique=True)],
        ownerships=[OwnershipSpec(navigation="Address", entity=address_entity)],
        annotations={"Comment": "registered users"},
    )
    order = _make_entity(
        "Order",
        properties=[
            PropertySpec(name="Id", clr_type="int", nullable=False),
            PropertySpec(name="UserId", clr_type="int", nullable=False),
        ],
        relationships=[
            RelationshipSpec(
                principal="Shop.Models.User",
                foreign_key=["UserId"],
                navigation="User",
                inverse_navigation="Orders",
                required=True,
            )
        ],
    )
    return SchemaModel(
        entities=[user, address_entity, order],
        annotations={"Relational:MaxIdentifierLength": 128},
        sequences=[SequenceDescriptor(name="OrderNumbers", start_value=1000, increment_by=5)],
        product_version="1.4.0",
    )
