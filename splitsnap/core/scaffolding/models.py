from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from pydantic import BaseModel


class ScaffoldedMigration(BaseModel):
    """Generated code for one migration, not yet written to disk."""

    migration_id: str
    migration_code: str
    metadata_code: str
    snapshot_code: str
    snapshot_name: str
    snapshot_namespace: str = ""
    snapshot_subnamespace: str = "Migrations"
    file_extension: str = ".py"


@dataclass(frozen=True)
class MigrationFiles:
    migration_file: Path
    metadata_file: Path
    # Primary snapshot (the orchestrator in split mode).
    snapshot_file: Path
    snapshot_files: List[Path] = field(default_factory=list)
