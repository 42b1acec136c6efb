"""
Artifact placement tests.
"""
from __future__ import annotations

from pathlib import Path

from splitsnap.core.generators.split_gen import Artifact, ArtifactRole
from splitsnap.core.scaffolding.placement import SNAPSHOTS_DIRNAME, placement_for


def _artifact(identifier: str, role: ArtifactRole) -> Artifact:
    return Artifact(identifier=identifier, content="", role=role)


def test_orchestrator_beside_migrations(tmp_path):
    path = placement_for(_artifact("ShopContextModelSnapshot", ArtifactRole.ORCHESTRATOR), tmp_path)
    assert path == tmp_path / "ShopContextModelSnapshot.py"


def test_entity_unit_in_snapshots_subdir(tmp_path):
    path = placement_for(_artifact("UserSnapshot", ArtifactRole.ENTITY_UNIT), tmp_path)
    assert path == tmp_path / SNAPSHOTS_DIRNAME / "UserSnapshot.py"
    assert SNAPSHOTS_DIRNAME == "Snapshots"


def test_custom_extension(tmp_path):
    path = placement_for(_artifact("UserSnapshot", ArtifactRole.ENTITY_UNIT), tmp_path, ".pyi")
    assert path.name == "UserSnapshot.pyi"


def test_relative_directory_becomes_absolute():
    path = placement_for(_artifact("UserSnapshot", ArtifactRole.ENTITY_UNIT), Path("Migrations"))
    assert path.is_absolute()
    assert path.parts[-3:] == ("Migrations", "Snapshots", "UserSnapshot.py")
