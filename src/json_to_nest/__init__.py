"""json-to-nest — translate JSON documents into NestJS interfaces and DTOs."""

from .converter import convert
from .document import ConversionResult
from .errors import JsonToNestError, ParseError, UnsupportedTopLevelShape
from .options import Mode, RenderOptions
from .renderer import render
from .resolver import Resolver
from .typedef import ArrayOf, Declaration, MemberDef, Reference, Scalar, TypeRef

__all__ = [
    "convert",
    "ConversionResult",
    "JsonToNestError",
    "ParseError",
    "UnsupportedTopLevelShape",
    "Mode",
    "RenderOptions",
    "render",
    "Resolver",
    "ArrayOf",
    "Declaration",
    "MemberDef",
    "Reference",
    "Scalar",
    "TypeRef",
]
