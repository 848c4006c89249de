"""Resolver: walks a JSON value tree and builds a Declaration tree."""

from __future__ import annotations

from .options import RenderOptions
from .reader import format_object_name, is_date_string, key_set, scalar_type
from .shapes import SeenShapes
from .typedef import (
    ArrayOf,
    Declaration,
    MemberDef,
    Reference,
    TypeRef,
    array_of,
    element_reference,
)


class Resolver:
    """Per-conversion resolve state.

    Create one per document; the SeenShapes table must not leak between
    conversions.

    Usage::

        root = Resolver(RenderOptions()).resolve_document({"id": 1})
        root.members[0]   # MemberDef(name="id", type=Scalar("number"), ...)
    """

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.options = options or RenderOptions()
        self.seen = SeenShapes()

    # -- Entry point ----------------------------------------------------

    def resolve_document(self, data) -> Declaration:
        """Resolve the top-level value into the root declaration."""
        root = Declaration(name=self.options.root_name + self.options.name_suffix)
        if isinstance(data, dict):
            self._resolve_members(root, data)
        else:
            root.alias = self.resolve(data, "", root)
        return root

    # -- Scopes ---------------------------------------------------------

    def resolve(self, value, field_name: str, owner: Declaration) -> TypeRef:
        """Return the type of *value*, declaring nested objects on *owner*."""
        ref, pending = self._type_of(value, field_name, owner)
        if pending is not None:
            self._resolve_members(*pending)
        return ref

    def _type_of(self, value, field_name: str, owner: Declaration):
        """Type of *value*, plus a new (declaration, object) still to be filled."""
        depth = 0
        # First element stands for the whole array
        while isinstance(value, list):
            if not value:
                return array_of(ArrayOf(None), depth), None
            value = value[0]
            depth += 1

        pending = None
        if isinstance(value, dict):
            ref, pending = self._object_type(value, field_name, owner)
        else:
            ref = scalar_type(value)
        return array_of(ref, depth), pending

    def _object_type(self, value: dict, field_name: str, owner: Declaration):
        keys = key_set(value)
        existing = self.seen.existing_name(field_name, keys)
        if existing is not None:
            return Reference(existing), None

        name = format_object_name(field_name, self.options)
        self.seen.record(field_name, keys, name)
        decl = Declaration(name=name)
        owner.children.append(decl)
        return Reference(name), (decl, value)

    def _resolve_members(self, decl: Declaration, obj: dict) -> None:
        """Fill *decl* and every object below it, depth-first in key order.

        Uses an explicit frame stack; nesting depth is bounded only by what
        the JSON parser accepts.
        """
        frames = [(decl, iter(obj.items()))]
        while frames:
            owner, items = frames[-1]
            entry = next(items, None)
            if entry is None:
                frames.pop()
                continue
            key, item = entry
            ref, pending = self._type_of(item, key, owner)
            owner.members.append(MemberDef(key, ref, self._annotations(item, ref)))
            if pending is not None:
                child, child_obj = pending
                frames.append((child, iter(child_obj.items())))

    # -- Validation annotations -----------------------------------------

    def _annotations(self, value, ref: TypeRef) -> list[str]:
        """class-validator decorators for a DTO member (none in interface mode)."""
        if not self.options.is_dto or value is None:
            return []
        if isinstance(value, bool):
            return ["@IsBoolean()"]
        if isinstance(value, (int, float)):
            return ["@IsNumber()"]
        if isinstance(value, str):
            if is_date_string(value):
                return ["@IsDateString()"]
            return ["@IsString()", "@IsNotEmpty()"]
        if isinstance(value, list):
            target = element_reference(ref)
            if target is None:
                return ["@IsArray()"]
            return [
                "@IsArray()",
                "@ValidateNested({ each: true })",
                f"@Type(() => {target.name})",
            ]
        if isinstance(value, dict):
            return ["@ValidateNested()", f"@Type(() => {ref.name})"]
        return []
