"""Loads doctrine-style comment annotations from JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping, Optional

from .models import (
    NameExpression,
    OpaqueType,
    OptionalType,
    ParsedComment,
    Tag,
    TypeApplication,
    TypeExpression,
)


class LoadError(RuntimeError):
    """Raised when a comment dump cannot be read or has an unexpected shape."""


def load_comments(path: Path) -> List[ParsedComment]:
    """Read a JSON comment dump from disk."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LoadError(f"Unable to read {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LoadError(f"{path.name} is not valid JSON: {exc}") from exc
    return comments_from_data(data)


def comments_from_data(data: Any) -> List[ParsedComment]:
    """Convert decoded JSON into parsed comments.

    Accepts either a list of annotations or a mapping with a ``comments`` list.
    """
    if isinstance(data, Mapping):
        data = data.get("comments")
    if not isinstance(data, list):
        raise LoadError("Expected a list of comments or an object with a 'comments' list")
    return [_comment_from_dict(item, index) for index, item in enumerate(data)]


def _comment_from_dict(item: Any, index: int) -> ParsedComment:
    if not isinstance(item, Mapping):
        raise LoadError(f"Comment #{index} must be an object")
    tags = item.get("tags", [])
    if not isinstance(tags, list):
        raise LoadError(f"Comment #{index} has non-list 'tags'")
    return ParsedComment(
        tags=tuple(_tag_from_dict(tag, index) for tag in tags),
        description=_as_str(item.get("description")),
    )


def _tag_from_dict(item: Any, index: int) -> Tag:
    if not isinstance(item, Mapping):
        raise LoadError(f"Comment #{index} contains a tag that is not an object")
    title = item.get("title")
    if not isinstance(title, str) or not title:
        raise LoadError(f"Comment #{index} contains a tag without a title")
    raw_type = item.get("type")
    return Tag(
        title=title,
        name=_as_str(item.get("name")),
        description=_as_str(item.get("description")),
        type=_type_from_dict(raw_type, index) if raw_type is not None else None,
    )


def _type_from_dict(item: Any, index: int) -> TypeExpression:
    if not isinstance(item, Mapping):
        raise LoadError(f"Comment #{index} contains a malformed type expression")
    kind = item.get("type")
    if kind == "NameExpression":
        return NameExpression(name=_as_str(item.get("name")) or "")
    if kind == "OptionalType":
        return OptionalType(expression=_type_from_dict(item.get("expression"), index))
    if kind == "TypeApplication":
        applications = item.get("applications") or []
        if not isinstance(applications, list):
            raise LoadError(f"Comment #{index} has a type application without a list of arguments")
        return TypeApplication(
            expression=_type_from_dict(item.get("expression"), index),
            applications=tuple(_type_from_dict(application, index) for application in applications),
        )
    return OpaqueType(kind=str(kind))


def _as_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


__all__ = ["LoadError", "comments_from_data", "load_comments"]
