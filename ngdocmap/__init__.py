"""Map parsed ngdoc comments into a module/entity/method documentation tree."""

from .mapper import MalformedCommentError, NgdocMapper
from .models import Entity, Method, Module, ParsedComment, Tag

__all__ = [
    "Entity",
    "MalformedCommentError",
    "Method",
    "Module",
    "NgdocMapper",
    "ParsedComment",
    "Tag",
]
