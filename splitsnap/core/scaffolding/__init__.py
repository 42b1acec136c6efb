from .models import MigrationFiles, ScaffoldedMigration
from .placement import SNAPSHOTS_DIRNAME, placement_for
from .scaffolder import MigrationScaffolder
from .split_scaffolder import SplitSnapshotScaffolder

__all__ = [
    "MigrationFiles",
    "MigrationScaffolder",
    "SNAPSHOTS_DIRNAME",
    "ScaffoldedMigration",
    "SplitSnapshotScaffolder",
    "placement_for",
]
