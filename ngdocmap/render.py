"""Serialises mapped modules as JSON or a Markdown reference page."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence

from jinja2 import Environment, FileSystemLoader

from .models import Module

FORMATS = ("json", "markdown")
_TEMPLATE_NAME = "reference.md.j2"


def to_data(modules: Sequence[Module]) -> List[Dict[str, Any]]:
    return [module.to_dict() for module in modules]


def to_json(modules: Sequence[Module], *, indent: int | None = 2) -> str:
    return json.dumps(to_data(modules), indent=indent) + "\n"


def to_markdown(modules: Sequence[Module], *, templates_dir: Path | None = None) -> str:
    """Render a Markdown reference page for the modules."""
    env = _create_env(templates_dir)
    template = env.get_template(_TEMPLATE_NAME)
    rendered = template.render(modules=to_data(modules))
    return rendered.strip() + "\n"


def render(modules: Sequence[Module], fmt: str = "json", *, indent: int | None = 2) -> str:
    if fmt == "json":
        return to_json(modules, indent=indent)
    if fmt == "markdown":
        return to_markdown(modules)
    raise ValueError(f"Unknown output format '{fmt}'. Expected one of: {', '.join(FORMATS)}")


def write_output(
    modules: Sequence[Module],
    path: Path,
    fmt: str = "json",
    *,
    indent: int | None = 2,
) -> str:
    """Render and write the modules, creating parent directories as needed.

    Returns the rendered text.
    """
    text = render(modules, fmt, indent=indent)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return text


def _create_env(templates_dir: Path | None) -> Environment:
    directories = []
    if templates_dir:
        directories.append(str(templates_dir))
    directories.append(str(Path(__file__).with_name("templates")))
    loader = FileSystemLoader(directories)
    return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


__all__ = ["FORMATS", "render", "to_data", "to_json", "to_markdown", "write_output"]
