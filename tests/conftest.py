from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator

import pytest

from ngdocmap.mapper import NgdocMapper
from tests._fixtures.comment_builder import CommentBuilder


@pytest.fixture
def builder() -> CommentBuilder:
    """Provide a reusable parsed-comment builder."""
    return CommentBuilder()


@pytest.fixture
def mapper() -> NgdocMapper:
    return NgdocMapper()


@pytest.fixture
def doctrine_dump(tmp_path: Path) -> Path:
    """Write a small doctrine-style comment dump and return its path."""
    payload = [
        {
            "description": "",
            "tags": [
                {"title": "ngdoc", "description": "module"},
                {"title": "name", "name": "app"},
            ],
        },
        {
            "description": "",
            "tags": [
                {"title": "ngdoc", "description": "directive"},
                {"title": "name", "name": "Widget"},
                {"title": "module", "name": "app"},
                {"title": "description", "description": "Renders a widget."},
                {"title": "requires", "name": "$http"},
                {
                    "title": "param",
                    "name": "items",
                    "description": "Entries to show.",
                    "type": {
                        "type": "OptionalType",
                        "expression": {
                            "type": "TypeApplication",
                            "expression": {"type": "NameExpression", "name": "Array"},
                            "applications": [{"type": "NameExpression", "name": "string"}],
                        },
                    },
                },
            ],
        },
        {
            "description": "",
            "tags": [
                {"title": "ngdoc", "description": "method"},
                {"title": "name", "name": "Widget#render"},
                {"title": "methodOf", "description": "Widget"},
                {"title": "description", "description": "Draws the widget."},
                {
                    "title": "param",
                    "name": "element",
                    "description": "Target node.",
                    "type": {"type": "NameExpression", "name": "Element"},
                },
                {
                    "title": "returns",
                    "description": "The rendered node.",
                    "type": {"type": "NameExpression", "name": "Element"},
                },
            ],
        },
    ]
    path = tmp_path / "comments.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_ngdocmap_logger() -> Iterator[None]:
    """Drop handlers installed by CLI runs so they do not outlive captured streams."""
    yield
    logger = logging.getLogger("ngdocmap")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
