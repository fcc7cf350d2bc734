"""Recognized ngdoc tag vocabulary and the predicates that match it."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, FrozenSet, Optional

from .models import ParsedComment, Tag

TagMatcher = Callable[[Tag], bool]


class TagKind(str, Enum):
    """Tag titles the mapper understands."""

    NAME = "name"
    NGDOC = "ngdoc"
    MODULE = "module"
    METHOD_OF = "methodOf"
    PARAM = "param"
    RETURNS = "returns"
    REQUIRES = "requires"
    DEPRECATED = "deprecated"
    DESCRIPTION = "description"


class TagValue(str, Enum):
    """Values carried by an ``@ngdoc`` tag that are not entity types."""

    MODULE = "module"
    METHOD = "method"


class EntityType(str, Enum):
    """Closed vocabulary of documentable entity kinds."""

    COMPONENT = "component"
    CONTROLLER = "controller"
    DIRECTIVE = "directive"
    FILTER = "filter"
    FUNCTION = "function"
    INPUT = "input"
    OBJECT = "object"
    PROVIDER = "provider"
    SERVICE = "service"
    TYPE = "type"


# doctrine keeps ``@return`` and ``@returns`` as distinct titles.
_TITLE_ALIASES: Dict[TagKind, FrozenSet[str]] = {
    TagKind.RETURNS: frozenset({"returns", "return"}),
}


def _title_matcher(kind: TagKind) -> TagMatcher:
    titles = _TITLE_ALIASES.get(kind, frozenset({kind.value}))

    def _match(tag: Tag) -> bool:
        return tag.title in titles

    return _match


def _value_matcher(value: TagValue) -> TagMatcher:
    def _match(tag: Tag) -> bool:
        return tag.description == value.value

    return _match


TAG_MATCHERS: Dict[TagKind, TagMatcher] = {kind: _title_matcher(kind) for kind in TagKind}
VALUE_MATCHERS: Dict[TagValue, TagMatcher] = {value: _value_matcher(value) for value in TagValue}


def matches(kind: TagKind) -> TagMatcher:
    """Return the predicate recognizing tags of ``kind``."""
    return TAG_MATCHERS[kind]


def is_entity_type(text: Optional[str]) -> bool:
    """Return True when ``text`` names an entity type, ignoring case."""
    if not text:
        return False
    return text.upper() in EntityType.__members__


def has_tag(
    comment: ParsedComment,
    kind: TagKind,
    where: Optional[TagMatcher] = None,
) -> bool:
    """Return True when the comment carries a ``kind`` tag also accepted by ``where``."""
    matcher = TAG_MATCHERS[kind]
    return any(matcher(tag) and (where is None or where(tag)) for tag in comment.tags)


__all__ = [
    "EntityType",
    "TAG_MATCHERS",
    "TagKind",
    "TagMatcher",
    "TagValue",
    "VALUE_MATCHERS",
    "has_tag",
    "is_entity_type",
    "matches",
]
