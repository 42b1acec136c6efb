from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Annotation values are emitted as Python literals, so only values whose
# repr() evaluates back to an equal value are accepted.
_SCALARS = (type(None), bool, int, str, bytes)


def _check_literal(value: Any, where: str) -> None:
    if type(value) is float:
        if not math.isfinite(value):
            raise ValueError(f"{where}: non-finite float {value!r} is not a literal")
    elif type(value) in (list, tuple, set, frozenset):
        for item in value:
            _check_literal(item, where)
    elif type(value) is dict:
        for k, v in value.items():
            _check_literal(k, where)
            _check_literal(v, where)
    elif type(value) not in _SCALARS:
        raise ValueError(f"{where}: {type(value).__name__} value {value!r} is not a literal")


def _literal_annotations(annotations: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in annotations.items():
        _check_literal(value, f"annotation {key!r}")
    return annotations


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class PropertySpec(_Frozen):
    name: str
    clr_type: str
    nullable: bool = True
    max_length: Optional[int] = None
    column_name: Optional[str] = None
    annotations: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("annotations")
    @classmethod
    def annotations_are_literals(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        return _literal_annotations(v)


class KeySpec(_Frozen):
    properties: List[str]
    name: Optional[str] = None


class IndexSpec(_Frozen):
    properties: List[str]
    unique: bool = False
    name: Optional[str] = None


class RelationshipSpec(_Frozen):
    principal: str
    foreign_key: List[str]
    navigation: Optional[str] = None
    inverse_navigation: Optional[str] = None
    on_delete: str = "cascade"  # cascade | restrict | set_null | no_action
    required: bool = False


class OwnershipSpec(_Frozen):
    navigation: str
    entity: "EntityDescriptor"
    many: bool = False


class EntityDescriptor(_Frozen):
    # Raw name (e.g. "Shop.Models.User"); type_name is the short display name and
    # may be absent for dynamically shaped entities.
    name: str
    type_name: Optional[str] = None
    owned: bool = False
    owner: Optional[str] = None

    table: Optional[str] = None
    schema_name: Optional[str] = None

    properties: List[PropertySpec] = Field(default_factory=list)
    keys: List[KeySpec] = Field(default_factory=list)
    indexes: List[IndexSpec] = Field(default_factory=list)
    relationships: List[RelationshipSpec] = Field(default_factory=list)
    ownerships: List[OwnershipSpec] = Field(default_factory=list)
    annotations: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("annotations")
    @classmethod
    def annotations_are_literals(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        return _literal_annotations(v)

    @property
    def display_name(self) -> str:
        return self.type_name or self.name


class SequenceDescriptor(_Frozen):
    name: str
    schema_name: Optional[str] = None
    clr_type: str = "int"
    start_value: int = 1
    increment_by: int = 1
    min_value: Optional[int] = None
    max_value: Optional[int] = None
    cyclic: bool = False


class SchemaModel(_Frozen):
    """
    Fully resolved schema at the moment a snapshot is requested.

    Entity and sequence order is the model's enumeration order; every
    generated artifact follows it.
    """

    entities: List[EntityDescriptor] = Field(default_factory=list)
    annotations: Dict[str, Any] = Field(default_factory=dict)
    sequences: List[SequenceDescriptor] = Field(default_factory=list)
    product_version: Optional[str] = None

    @field_validator("annotations")
    @classmethod
    def annotations_are_literals(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        return _literal_annotations(v)

    def non_owned_entities(self) -> Tuple[EntityDescriptor, ...]:
        return tuple(e for e in self.entities if not e.owned)


OwnershipSpec.model_rebuild()
