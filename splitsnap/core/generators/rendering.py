from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

PACKAGE_ROOT = Path(__file__).resolve().parents[2]
TEMPLATES_DIR = PACKAGE_ROOT / "templates"

BUILDER_NAME = "model_builder"


@lru_cache(maxsize=1)
def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(enabled_extensions=()),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["pyrepr"] = repr
    return env


def render(template_name: str, **context: Any) -> str:
    return _environment().get_template(template_name).render(**context)


def type_reference(owner_type: Union[type, str]) -> str:
    """Dotted reference for the type a snapshot belongs to."""
    if isinstance(owner_type, str):
        return owner_type
    return f"{owner_type.__module__}.{owner_type.__qualname__}"


def join_namespace(*parts: str) -> str:
    return ".".join(p for p in parts if p)
