"""Tests for ngdocmap.loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from ngdocmap.loader import LoadError, comments_from_data, load_comments
from ngdocmap.models import NameExpression, OpaqueType, OptionalType, Tag, TypeApplication
from ngdocmap.typeexpr import to_param


def test_load_comments_reads_doctrine_dump(doctrine_dump: Path) -> None:
    comments = load_comments(doctrine_dump)

    assert len(comments) == 3
    module = comments[0]
    assert module.tags == (
        Tag(title="ngdoc", description="module"),
        Tag(title="name", name="app"),
    )
    items = comments[1].tags[-1]
    assert items.type == OptionalType(
        expression=TypeApplication(
            expression=NameExpression(name="Array"),
            applications=(NameExpression(name="string"),),
        )
    )


def test_comments_from_data_accepts_wrapped_payload() -> None:
    comments = comments_from_data({"comments": [{"tags": [{"title": "ngdoc", "description": "module"}]}]})

    assert comments[0].tags[0].description == "module"
    assert comments[0].description is None


def test_unknown_type_kinds_become_opaque() -> None:
    comments = comments_from_data(
        [{"tags": [{"title": "param", "name": "value", "type": {"type": "UnionType", "elements": []}}]}]
    )

    assert comments[0].tags[0].type == OpaqueType(kind="UnionType")


@pytest.mark.parametrize(
    "payload",
    [
        "not a list",
        {"items": []},
        [42],
        [{"tags": "ngdoc"}],
        [{"tags": [{"name": "untitled"}]}],
        [{"tags": [{"title": "param", "type": "string"}]}],
    ],
)
def test_comments_from_data_rejects_malformed_payloads(payload: object) -> None:
    with pytest.raises(LoadError):
        comments_from_data(payload)


def test_load_comments_reports_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(LoadError, match="not valid JSON"):
        load_comments(path)


def test_load_comments_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LoadError, match="Unable to read"):
        load_comments(tmp_path / "missing.json")


def test_null_type_name_loads_as_empty_and_maps_without_type() -> None:
    comments = comments_from_data(
        [{"tags": [{"title": "param", "name": "x", "type": {"type": "NameExpression", "name": None}}]}]
    )

    tag = comments[0].tags[0]
    assert tag.type == NameExpression(name="")
    assert to_param(tag).to_dict() == {"name": "x"}
