"""Maps parsed ngdoc comments onto modules, entities and methods."""

from __future__ import annotations

from typing import Callable, List, Sequence, TypeVar

from .models import Entity, Method, Module, ParsedComment, Tag
from .tags import TagKind, TagValue, VALUE_MATCHERS, has_tag, is_entity_type, matches
from .typeexpr import to_attribute, to_param, to_return

T = TypeVar("T")
CommentPredicate = Callable[[ParsedComment], bool]

METHOD_SEPARATOR = "#"


class MalformedCommentError(ValueError):
    """Raised when a selected comment lacks a tag required to convert it."""

    def __init__(self, message: str, *, comment: ParsedComment, missing: str) -> None:
        super().__init__(message)
        self.comment = comment
        self.missing = missing


def _select(
    comments: Sequence[ParsedComment],
    predicates: Sequence[CommentPredicate],
    converter: Callable[[ParsedComment], T],
) -> List[T]:
    return [converter(comment) for comment in comments if all(check(comment) for check in predicates)]


def _require(comment: ParsedComment, kind: TagKind, context: str) -> Tag:
    tag = comment.find(matches(kind))
    if tag is None:
        raise MalformedCommentError(
            f"{context} comment is missing its @{kind.value} tag",
            comment=comment,
            missing=kind.value,
        )
    return tag


def _require_name(comment: ParsedComment, context: str) -> str:
    name = _require(comment, TagKind.NAME, context).name
    if not name:
        raise MalformedCommentError(
            f"{context} comment has an empty @name tag",
            comment=comment,
            missing=TagKind.NAME.value,
        )
    return name


def _first_description(comment: ParsedComment, kind: TagKind) -> str | None:
    tag = comment.find(matches(kind))
    return tag.description if tag is not None else None


class NgdocMapper:
    """Builds the module -> entity -> method tree from a flat comment list."""

    def map(self, comments: Sequence[ParsedComment]) -> List[Module]:
        """Map the comments to modules with their entities and methods populated."""
        modules = self.get_modules(comments)
        for module in modules:
            module.entities = self.get_entities(comments, module)
            for entity in module.entities:
                entity.methods = self.get_methods(comments, entity)
        return modules

    def get_modules(self, comments: Sequence[ParsedComment]) -> List[Module]:
        return _select(comments, [self._declares_module], self._to_module)

    def get_entities(self, comments: Sequence[ParsedComment], module: Module) -> List[Entity]:
        return _select(
            comments,
            [self._belongs_to_module(module), self._has_entity_type],
            self._to_entity,
        )

    def get_methods(self, comments: Sequence[ParsedComment], entity: Entity) -> List[Method]:
        return _select(
            comments,
            [self._is_method_of(entity), self._declares_method],
            self._to_method,
        )

    @staticmethod
    def _declares_module(comment: ParsedComment) -> bool:
        return has_tag(comment, TagKind.NGDOC, VALUE_MATCHERS[TagValue.MODULE])

    @staticmethod
    def _declares_method(comment: ParsedComment) -> bool:
        return has_tag(comment, TagKind.NGDOC, VALUE_MATCHERS[TagValue.METHOD])

    @staticmethod
    def _has_entity_type(comment: ParsedComment) -> bool:
        return has_tag(comment, TagKind.NGDOC, lambda tag: is_entity_type(tag.description))

    @staticmethod
    def _belongs_to_module(module: Module) -> CommentPredicate:
        def _check(comment: ParsedComment) -> bool:
            return has_tag(comment, TagKind.MODULE, lambda tag: tag.name == module.name)

        return _check

    @staticmethod
    def _is_method_of(entity: Entity) -> CommentPredicate:
        def _check(comment: ParsedComment) -> bool:
            return has_tag(comment, TagKind.METHOD_OF, lambda tag: tag.description == entity.name)

        return _check

    @staticmethod
    def _to_module(comment: ParsedComment) -> Module:
        return Module(name=_require_name(comment, "Module"))

    @staticmethod
    def _to_entity(comment: ParsedComment) -> Entity:
        ngdoc = _require(comment, TagKind.NGDOC, "Entity")
        return Entity(
            name=_require_name(comment, "Entity"),
            type=ngdoc.description or "",
            attributes=[to_attribute(tag) for tag in comment.filter(matches(TagKind.PARAM))],
            requires=[tag.name or "" for tag in comment.filter(matches(TagKind.REQUIRES))],
            deprecated=_first_description(comment, TagKind.DEPRECATED),
            description=_first_description(comment, TagKind.DESCRIPTION),
        )

    @staticmethod
    def _to_method(comment: ParsedComment) -> Method:
        raw_name = _require_name(comment, "Method")
        _, separator, tail = raw_name.partition(METHOD_SEPARATOR)
        if separator and not tail:
            raise MalformedCommentError(
                f"Method comment @name '{raw_name}' has nothing after '{METHOD_SEPARATOR}'",
                comment=comment,
                missing=TagKind.NAME.value,
            )
        description = _require(comment, TagKind.DESCRIPTION, "Method").description

        returns_tag = comment.find(matches(TagKind.RETURNS))
        params = [to_param(tag) for tag in comment.filter(matches(TagKind.PARAM))]
        return Method(
            name=tail if separator else raw_name,
            description=description or "",
            params=params or None,
            returns=to_return(returns_tag) if returns_tag is not None else None,
            deprecated=_first_description(comment, TagKind.DEPRECATED),
        )


__all__ = ["MalformedCommentError", "NgdocMapper"]
