"""
Split-snapshot migration scaffolder.

Drop-in replacement for MigrationScaffolder.save(). When split mode is off
the call goes to the wrapped scaffolder untouched. When on, the migration
files are written as usual and the model snapshot is written as an
orchestrator next to them plus one unit per entity under Snapshots/.

All artifacts are generated before the first write, so a generation error
(e.g. IdentifierCollision) leaves the directory untouched. Writes are not
transactional: a WriteFailure leaves earlier files on disk.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from splitsnap.core.config import SplitSnapshotOptions
from splitsnap.core.errors import require
from splitsnap.core.generators.emitter import CodeEmitter
from splitsnap.core.generators.split_gen import Artifact, split_snapshots
from splitsnap.core.observability.metrics import record_artifact, record_save
from splitsnap.core.schema_model import SchemaModel

from .models import MigrationFiles, ScaffoldedMigration
from .placement import placement_for
from .scaffolder import MigrationScaffolder, PathLike, write_text

log = logging.getLogger("splitsnap.scaffold")

OptionsSource = Union[SplitSnapshotOptions, Callable[[], SplitSnapshotOptions], None]


class SplitSnapshotScaffolder:
    def __init__(
        self,
        host: MigrationScaffolder,
        model: SchemaModel,
        owner_type: Union[type, str],
        options: OptionsSource = None,
        *,
        emitter: Optional[CodeEmitter] = None,
    ):
        self._host = require(host, "host")
        self._model = model
        self._owner_type = owner_type
        self._options = options
        self._emitter = emitter

    def should_use_split_snapshots(self) -> bool:
        source = self._options
        try:
            options = source() if callable(source) else source
            return bool(options is not None and options.use_split_snapshots)
        except Exception as exc:
            # any failure to read the flag means standard mode
            log.warning("Could not read split snapshot options, split mode disabled: %r", exc)
            return False

    def save(
        self,
        project_dir: PathLike,
        migration: ScaffoldedMigration,
        output_dir: Optional[PathLike] = None,
        dry_run: bool = False,
    ) -> MigrationFiles:
        require(project_dir, "project_dir")
        require(migration, "migration")

        if not self.should_use_split_snapshots():
            log.info("Using standard model snapshot (split mode disabled)")
            record_save("standard", dry_run)
            return self._host.save(project_dir, migration, output_dir, dry_run)

        require(self._model, "model")
        require(self._owner_type, "owner_type")
        log.info("Using split model snapshots")

        artifacts = split_snapshots(
            migration.snapshot_namespace,
            self._owner_type,
            migration.snapshot_name,
            self._model,
            emitter=self._emitter,
        )

        directory = self._host.migration_directory(project_dir, migration, output_dir)
        migration_file, metadata_file = self._host.migration_paths(directory, migration)
        if not dry_run:
            self._host.write_migration(migration_file, metadata_file, migration)

        snapshot_files = self._save_split_snapshots(artifacts, directory, migration.file_extension, dry_run)

        record_save("split", dry_run)
        return MigrationFiles(
            migration_file=migration_file,
            metadata_file=metadata_file,
            snapshot_file=snapshot_files[0],
            snapshot_files=snapshot_files,
        )

    def _save_split_snapshots(
        self,
        artifacts: Sequence[Artifact],
        directory: Path,
        file_extension: str,
        dry_run: bool,
    ) -> List[Path]:
        saved: List[Path] = []
        for artifact in artifacts:
            path = placement_for(artifact, directory, file_extension)
            if not dry_run:
                log.debug("Writing snapshot to %s", path)
                write_text(path, artifact.content)
            record_artifact(artifact.role.value, dry_run)
            saved.append(path)

        log.info(
            "Generated %d snapshot files (%d entities + 1 orchestrator)",
            len(saved),
            len(saved) - 1,
        )
        return saved
