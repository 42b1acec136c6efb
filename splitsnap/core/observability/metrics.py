from __future__ import annotations

from collections import Counter
from typing import Dict

from prometheus_client import Counter as PromCounter

# Named counters (in-process, cheap to assert on in tests)
_NAMED = Counter()

SNAPSHOT_ARTIFACTS_TOTAL = PromCounter(
    "splitsnap_snapshot_artifacts_total",
    "Snapshot artifacts produced by split-mode saves",
    ["role", "dry_run"],
)

SCAFFOLD_SAVES_TOTAL = PromCounter(
    "splitsnap_scaffold_saves_total",
    "Migration saves by snapshot mode",
    ["mode"],
)


def reset_metrics() -> None:
    """
    Test helper: clears the named counters to avoid cross-test leakage.
    Prometheus counters are monotonic and are left alone.
    """
    _NAMED.clear()


def inc_named(name: str, value: int = 1) -> None:
    if not name:
        return
    _NAMED[name] += int(value)


def record_artifact(role: str, dry_run: bool) -> None:
    SNAPSHOT_ARTIFACTS_TOTAL.labels(role=role, dry_run=str(bool(dry_run)).lower()).inc()
    inc_named(f"artifacts_{role}")


def record_save(mode: str, dry_run: bool) -> None:
    SCAFFOLD_SAVES_TOTAL.labels(mode=mode).inc()
    inc_named(f"saves_{mode}")
    if dry_run:
        inc_named("saves_dry_run")


def snapshot_named() -> Dict[str, int]:
    return dict(_NAMED)
