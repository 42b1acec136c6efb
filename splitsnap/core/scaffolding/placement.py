from __future__ import annotations

from pathlib import Path
from typing import Union

from splitsnap.core.generators.split_gen import Artifact, ArtifactRole

SNAPSHOTS_DIRNAME = "Snapshots"


def placement_for(
    artifact: Artifact,
    migration_directory: Union[str, Path],
    file_extension: str = ".py",
) -> Path:
    """
    Orchestrator -> <dir>/<name><ext> (where single-file tooling expects the snapshot)
    Entity unit  -> <dir>/Snapshots/<identifier><ext>
    """
    base = Path(migration_directory).absolute()
    file_name = artifact.file_name(file_extension)
    if artifact.role == ArtifactRole.ORCHESTRATOR:
        return base / file_name
    return base / SNAPSHOTS_DIRNAME / file_name
