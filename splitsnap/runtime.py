"""
Model-builder runtime used by generated snapshot modules.

Builders only record what a snapshot declares; the recorded operations are
plain tuples so two snapshots can be compared for equivalence.
"""
from __future__ import annotations

import importlib.machinery
import importlib.util
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, List, Optional, Tuple, Union

SNAPSHOTS_DIRNAME = "Snapshots"

Operation = Tuple[Any, ...]


class EntityTypeBuilder:
    def __init__(self, name: str, navigation: Optional[str] = None, many: bool = False):
        self.name = name
        self.navigation = navigation
        self.many = many
        self.operations: List[Operation] = []
        self.owned: List["EntityTypeBuilder"] = []

    def __enter__(self) -> "EntityTypeBuilder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None

    def property(self, name: str, clr_type: str, **options: Any) -> "EntityTypeBuilder":
        self.operations.append(("property", name, clr_type, options))
        return self

    def has_key(self, *properties: str, name: Optional[str] = None) -> "EntityTypeBuilder":
        self.operations.append(("key", properties, name))
        return self

    def has_index(self, *properties: str, unique: bool = False, name: Optional[str] = None) -> "EntityTypeBuilder":
        self.operations.append(("index", properties, unique, name))
        return self

    def to_table(self, table: str, schema: Optional[str] = None) -> "EntityTypeBuilder":
        self.operations.append(("table", table, schema))
        return self

    def has_relationship(self, principal: str, **options: Any) -> "EntityTypeBuilder":
        self.operations.append(("relationship", principal, options))
        return self

    def has_annotation(self, key: str, value: Any) -> "EntityTypeBuilder":
        self.operations.append(("annotation", key, value))
        return self

    def owns_one(self, name: str, navigation: str) -> "EntityTypeBuilder":
        return self._own(name, navigation, many=False)

    def owns_many(self, name: str, navigation: str) -> "EntityTypeBuilder":
        return self._own(name, navigation, many=True)

    def _own(self, name: str, navigation: str, many: bool) -> "EntityTypeBuilder":
        child = EntityTypeBuilder(name, navigation=navigation, many=many)
        self.owned.append(child)
        return child

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "navigation": self.navigation,
            "many": self.many,
            "operations": list(self.operations),
            "owned": [o.describe() for o in self.owned],
        }


class ModelBuilder:
    def __init__(self) -> None:
        self.annotations: Dict[str, Any] = {}
        self.sequences: Dict[str, Dict[str, Any]] = {}
        self.entities: Dict[str, EntityTypeBuilder] = {}

    def has_annotation(self, key: str, value: Any) -> "ModelBuilder":
        self.annotations[key] = value
        return self

    def has_sequence(self, name: str, **options: Any) -> "ModelBuilder":
        self.sequences[name] = options
        return self

    def entity(self, name: str) -> EntityTypeBuilder:
        # Re-entering an entity keeps configuring the same builder.
        if name not in self.entities:
            self.entities[name] = EntityTypeBuilder(name)
        return self.entities[name]

    def describe(self) -> Dict[str, Any]:
        return {
            "annotations": dict(self.annotations),
            "sequences": dict(self.sequences),
            "entities": [e.describe() for e in self.entities.values()],
        }


class ModelSnapshot:
    """Base class for generated model snapshots."""

    context: str = ""

    def build_model(self, model_builder: ModelBuilder) -> None:
        raise NotImplementedError

    @property
    def model(self) -> ModelBuilder:
        builder = ModelBuilder()
        self.build_model(builder)
        return builder


def load_unit(anchor_file: Union[str, Path], identifier: str) -> ModuleType:
    """
    Import <dir of anchor_file>/Snapshots/<identifier><ext> by path.

    Units are written with the same extension as the orchestrator, so <ext>
    is taken from anchor_file (".py" when it has none).
    """
    anchor = Path(anchor_file).resolve()
    path = anchor.parent / SNAPSHOTS_DIRNAME / f"{identifier}{anchor.suffix or '.py'}"
    name = f"_splitsnap_unit_{abs(hash(str(path)))}"
    # an explicit loader lets non-.py extensions import as source
    loader = importlib.machinery.SourceFileLoader(name, str(path))
    spec = importlib.util.spec_from_file_location(name, path, loader=loader)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load snapshot unit {identifier!r} from {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
