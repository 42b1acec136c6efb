"""
Split snapshot options.

The opt-in flag is resolved from (highest precedence first):
    SPLITSNAP_USE_SPLIT_SNAPSHOTS   env var: 1/true/yes/on or 0/false/no/off
    an options file (YAML or JSON)  path argument, else SPLITSNAP_CONFIG,
                                    else ./splitsnap.yaml

Options file format:
    use_split_snapshots: true
or
    split_snapshots:
      enabled: true

A missing file means defaults (split mode off). An unreadable or malformed
file raises ConfigurationReadFailure; the scaffolder treats that as off.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ConfigurationReadFailure

_log = logging.getLogger("splitsnap.config")

ENV_CONFIG_PATH = "SPLITSNAP_CONFIG"
ENV_USE_SPLIT = "SPLITSNAP_USE_SPLIT_SNAPSHOTS"
DEFAULT_CONFIG_FILE = "splitsnap.yaml"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class SplitSnapshotOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    use_split_snapshots: bool = False

    def with_split_snapshots(self, enabled: bool = True) -> "SplitSnapshotOptions":
        return self.model_copy(update={"use_split_snapshots": enabled})

    @property
    def log_fragment(self) -> str:
        return "using split snapshots" if self.use_split_snapshots else ""

    def debug_info(self) -> Dict[str, str]:
        return {"SplitSnapshots:Enabled": str(self.use_split_snapshots)}


def _resolve_path(path: Optional[Path]) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.getenv(ENV_CONFIG_PATH, "").strip()
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_CONFIG_FILE


def _parse(raw_text: str, source: Path) -> Dict[str, Any]:
    # JSON first, then YAML
    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ConfigurationReadFailure(f"Failed to parse {source} as JSON or YAML: {exc}", source) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationReadFailure(
            f"Options file {source} must be a mapping, got {type(data).__name__}", source
        )

    nested = data.get("split_snapshots")
    if isinstance(nested, dict):
        return {"use_split_snapshots": nested.get("enabled", False)}
    return {k: v for k, v in data.items() if k == "use_split_snapshots"}


def _env_flag() -> Optional[bool]:
    raw = os.getenv(ENV_USE_SPLIT, "").strip().lower()
    if not raw:
        return None
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ConfigurationReadFailure(f"{ENV_USE_SPLIT} has unrecognised value {raw!r}", ENV_USE_SPLIT)


def load_split_options(path: Optional[Path] = None) -> SplitSnapshotOptions:
    resolved = _resolve_path(path)
    values: Dict[str, Any] = {}

    if resolved.exists():
        try:
            raw_text = resolved.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationReadFailure(f"Cannot read options file {resolved}: {exc}", resolved) from exc
        values = _parse(raw_text, resolved)
        _log.debug("Loaded split snapshot options from %s", resolved)

    flag = _env_flag()
    if flag is not None:
        values["use_split_snapshots"] = flag

    try:
        return SplitSnapshotOptions(**values)
    except ValidationError as exc:
        raise ConfigurationReadFailure(f"Invalid split snapshot options in {resolved}: {exc}", resolved) from exc
