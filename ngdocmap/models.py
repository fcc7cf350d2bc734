"""Data models for parsed ngdoc comments and the mapped documentation tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class NameExpression:
    """A plain type name such as ``string`` or ``MyService``."""

    name: str


@dataclass(frozen=True)
class OptionalType:
    """Optional wrapper around an inner expression (``{string=}`` or ``[name]``)."""

    expression: "TypeExpression"


@dataclass(frozen=True)
class TypeApplication:
    """Generic application such as ``Array.<string>``."""

    expression: "TypeExpression"
    applications: Tuple["TypeExpression", ...] = ()


@dataclass(frozen=True)
class OpaqueType:
    """Any other type expression kind. It carries no usable name."""

    kind: str


TypeExpression = Union[NameExpression, OptionalType, TypeApplication, OpaqueType]


@dataclass(frozen=True)
class Tag:
    """One directive within a parsed comment (``@param``, ``@ngdoc``, ...)."""

    title: str
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[TypeExpression] = None


@dataclass(frozen=True)
class ParsedComment:
    """A documentation comment already decomposed into tags."""

    tags: Tuple[Tag, ...] = ()
    description: Optional[str] = None

    def find(self, predicate: Callable[[Tag], bool]) -> Optional[Tag]:
        """Return the first tag accepted by ``predicate`` in comment order."""
        return next((tag for tag in self.tags if predicate(tag)), None)

    def filter(self, predicate: Callable[[Tag], bool]) -> List[Tag]:
        return [tag for tag in self.tags if predicate(tag)]


def _compact(values: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


@dataclass
class ParamType:
    """Documented method parameter."""

    name: str
    description: Optional[str] = None
    type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"name": self.name, "description": self.description, "type": self.type})


@dataclass
class AttributeType:
    """Documented entity attribute. ``optional`` is always serialised."""

    name: str
    optional: bool = False
    description: Optional[str] = None
    type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": self.name, "optional": self.optional}
        payload.update(_compact({"description": self.description, "type": self.type}))
        return payload


@dataclass
class ReturnType:
    """Documented method return value."""

    name: Optional[str]
    type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"name": self.name, "type": self.type})


@dataclass
class Method:
    """Method documented against an entity.

    ``params`` is ``None`` when no parameter was documented, which is distinct
    from an empty list.
    """

    name: str
    description: str
    params: Optional[List[ParamType]] = None
    returns: Optional[ReturnType] = None
    deprecated: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": self.name, "description": self.description}
        if self.params is not None:
            payload["params"] = [param.to_dict() for param in self.params]
        if self.returns is not None:
            payload["returns"] = self.returns.to_dict()
        if self.deprecated is not None:
            payload["deprecated"] = self.deprecated
        return payload


@dataclass
class Entity:
    """Documented unit of code (service, directive, ...) within a module."""

    name: str
    type: str
    attributes: List[AttributeType] = field(default_factory=list)
    requires: List[str] = field(default_factory=list)
    deprecated: Optional[str] = None
    description: Optional[str] = None
    methods: List[Method] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "attributes": [attribute.to_dict() for attribute in self.attributes],
            "requires": list(self.requires),
        }
        payload.update(_compact({"deprecated": self.deprecated, "description": self.description}))
        payload["methods"] = [method.to_dict() for method in self.methods]
        return payload


@dataclass
class Module:
    """Top-level documented module."""

    name: str
    entities: List[Entity] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "entities": [entity.to_dict() for entity in self.entities],
        }
