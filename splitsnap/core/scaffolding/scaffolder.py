"""
Standard (single-file) migration scaffolder.

Writes the migration script, its metadata companion and one model snapshot
file. SplitSnapshotScaffolder delegates to it unchanged when split mode is
off and reuses its path and write helpers when it is on.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from splitsnap.core.errors import WriteFailure, require

from .models import MigrationFiles, ScaffoldedMigration

log = logging.getLogger("splitsnap.scaffold")

METADATA_SUFFIX = "_designer"

PathLike = Union[str, Path]


def write_text(path: Path, content: str) -> None:
    """Create the parent directory and write UTF-8 text; OS errors become WriteFailure."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WriteFailure(path, exc.strerror or str(exc)) from exc


class MigrationScaffolder:
    def migration_directory(
        self,
        project_dir: PathLike,
        migration: ScaffoldedMigration,
        output_dir: Optional[PathLike] = None,
    ) -> Path:
        base = Path(project_dir)
        if output_dir:
            # absolute output_dir wins over project_dir
            return (base / output_dir).absolute()
        parts = [p for p in migration.snapshot_subnamespace.split(".") if p]
        return base.joinpath(*parts).absolute()

    def migration_paths(self, directory: Path, migration: ScaffoldedMigration) -> Tuple[Path, Path]:
        ext = migration.file_extension
        return (
            directory / f"{migration.migration_id}{ext}",
            directory / f"{migration.migration_id}{METADATA_SUFFIX}{ext}",
        )

    def write_migration(self, migration_file: Path, metadata_file: Path, migration: ScaffoldedMigration) -> None:
        log.debug("Writing migration to %s", migration_file)
        write_text(migration_file, migration.migration_code)
        log.debug("Writing metadata to %s", metadata_file)
        write_text(metadata_file, migration.metadata_code)

    def save(
        self,
        project_dir: PathLike,
        migration: ScaffoldedMigration,
        output_dir: Optional[PathLike] = None,
        dry_run: bool = False,
    ) -> MigrationFiles:
        require(project_dir, "project_dir")
        require(migration, "migration")

        directory = self.migration_directory(project_dir, migration, output_dir)
        migration_file, metadata_file = self.migration_paths(directory, migration)
        snapshot_file = directory / f"{migration.snapshot_name}{migration.file_extension}"

        if not dry_run:
            self.write_migration(migration_file, metadata_file, migration)
            log.debug("Writing snapshot to %s", snapshot_file)
            write_text(snapshot_file, migration.snapshot_code)

        return MigrationFiles(
            migration_file=migration_file,
            metadata_file=metadata_file,
            snapshot_file=snapshot_file,
            snapshot_files=[snapshot_file],
        )
