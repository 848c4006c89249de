"""Renderer: Declaration tree → declaration text."""

from __future__ import annotations

from .options import RenderOptions
from .typedef import ArrayOf, Declaration, MemberDef, Scalar, TypeRef


_SCALAR_TOKENS: dict[str, str] = {
    "string": "string",
    "number": "number",
    "boolean": "boolean",
    "null": "{}",
    "unknown": "{}",
}


# ---------------------------------------------------------------------------
# Type text
# ---------------------------------------------------------------------------

def _base_type(ref: TypeRef | None) -> str:
    depth = 0
    while isinstance(ref, ArrayOf):
        ref = ref.element
        depth += 1
    if ref is None:
        base = ""
    elif isinstance(ref, Scalar):
        base = _SCALAR_TOKENS.get(ref.token, "{}")
    else:
        base = ref.name
    return base + "[]" * depth


def type_text(ref: TypeRef) -> str:
    """Render a member type with its terminator.

    ``null`` renders as a bare ``{}``; everything else ends with ``;``.
    """
    if isinstance(ref, Scalar) and ref.token == "null":
        return "{}"
    return _base_type(ref) + ";"


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------

def _render_members(members: list[MemberDef], options: RenderOptions) -> str:
    out: list[str] = []
    last = len(members) - 1
    for i, member in enumerate(members):
        for annotation in member.annotations:
            out.append(f"{options.indent}{annotation}\n")
        out.append(f"{options.indent}{member.name}: {type_text(member.type)}")
        out.append("\n\n" if options.is_dto and i != last else "\n")
    return "".join(out)


def render_declaration(decl: Declaration, options: RenderOptions) -> str:
    """Render one ``export <kind> <Name> { ... }`` block (no nested blocks)."""
    header = f"export {options.kind} {decl.name}"
    if decl.alias is not None:
        return f"{header} {type_text(decl.alias)}"
    return f"{header} {{\n{_render_members(decl.members, options)}}}\n"


def render(root: Declaration, options: RenderOptions) -> str:
    """Render the root first, then every nested declaration.

    Nested declarations are separated by a blank line and ordered
    depth-first with children before their parent.
    """
    parts = [render_declaration(root, options)]
    for decl in root.walk():
        parts.append("\n" + render_declaration(decl, options))
    return "".join(parts)
