"""Normalization of doctrine type expressions into flat type names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .models import (
    AttributeType,
    NameExpression,
    OptionalType,
    ParamType,
    ReturnType,
    Tag,
    TypeApplication,
    TypeExpression,
)

ARRAY_BASE = "Array"
ARRAY_SUFFIX = "[]"


@dataclass(frozen=True)
class NormalizedType:
    """Flattened view of a type expression."""

    type: Optional[str]
    optional: bool = False


def normalize(expression: Optional[TypeExpression]) -> NormalizedType:
    """Reduce ``expression`` to a type name plus an optionality flag.

    A single optional wrapper is peeled off first. ``Array`` applications
    become ``<args>[]`` with the argument names joined by commas, so
    ``Array.<A, B>`` yields ``"A,B[]"``. Any other generic application, and
    any expression without a name, leaves the type unset.
    """
    if expression is None:
        return NormalizedType(type=None)

    optional = False
    match expression:
        case OptionalType(expression=inner):
            optional = True
            expression = inner

    match expression:
        case TypeApplication(
            expression=NameExpression(name=base), applications=arguments
        ) if base == ARRAY_BASE:
            names = ",".join(_name_of(argument) for argument in arguments)
            type_name: Optional[str] = names + ARRAY_SUFFIX
        case TypeApplication():
            # Only arrays are flattened; other generics are not supported yet.
            type_name = None
        case NameExpression(name=name):
            type_name = name or None
        case _:
            type_name = None
    return NormalizedType(type=type_name, optional=optional)


def _name_of(expression: TypeExpression) -> str:
    if isinstance(expression, NameExpression):
        return expression.name
    return ""


def to_attribute(tag: Tag) -> AttributeType:
    normalized = normalize(tag.type)
    return AttributeType(
        name=tag.name or "",
        optional=normalized.optional,
        description=tag.description,
        type=normalized.type,
    )


def to_param(tag: Tag) -> ParamType:
    normalized = normalize(tag.type)
    return ParamType(name=tag.name or "", description=tag.description, type=normalized.type)


def to_return(tag: Tag) -> ReturnType:
    """Return signature of a ``@returns`` tag; its description becomes the name.

    Only a plain type name is kept. Optional and generic return types carry
    no name and leave the type unset.
    """
    type_name = (tag.type.name or None) if isinstance(tag.type, NameExpression) else None
    return ReturnType(name=tag.description, type=type_name)


__all__ = ["NormalizedType", "normalize", "to_attribute", "to_param", "to_return"]
