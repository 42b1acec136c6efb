"""Split model snapshots: one snapshot file per entity plus an orchestrator."""

__version__ = "0.1.0"
