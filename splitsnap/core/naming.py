"""
Snapshot identifier policy.

An entity's identifier is used both as its artifact file name and as the
reference the orchestrator uses to invoke it, so every caller must derive it
through identifier_for().

Known limitation: names longer than MAX_NAME_LENGTH are truncated, so two
long names sharing a prefix map to the same identifier. The split
coordinator detects that and fails instead of overwriting a file.
"""
from __future__ import annotations

import re

from .errors import InvalidArgument
from .schema_model import EntityDescriptor

SNAPSHOT_SUFFIX = "Snapshot"
MAX_NAME_LENGTH = 200

# Fixed, platform-independent set: Windows-reserved characters plus control chars.
_ILLEGAL_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def sanitize_file_name(name: str) -> str:
    return _ILLEGAL_CHARS.sub("_", name)


def identifier_for(entity: EntityDescriptor) -> str:
    if entity is None:
        raise InvalidArgument("entity")

    candidate = entity.type_name or entity.name
    if not candidate:
        raise InvalidArgument("entity", "entity has neither a type name nor a name")

    name = sanitize_file_name(candidate)[:MAX_NAME_LENGTH]
    return f"{name}{SNAPSHOT_SUFFIX}"
