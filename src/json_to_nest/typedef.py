"""Declaration and member types produced by the resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Scalar:
    token: str  # "string" | "number" | "boolean" | "null" | "unknown"


@dataclass(frozen=True)
class ArrayOf:
    element: "TypeRef | None"  # None for an empty array


@dataclass(frozen=True)
class Reference:
    name: str  # name of a Declaration emitted somewhere in the tree


TypeRef = Union[Scalar, ArrayOf, Reference]


@dataclass
class MemberDef:
    name: str
    type: TypeRef
    annotations: list[str] = field(default_factory=list)


@dataclass
class Declaration:
    name: str
    members: list[MemberDef] = field(default_factory=list)
    children: list["Declaration"] = field(default_factory=list)  # declared by members, in key order
    alias: TypeRef | None = None  # set only for a root whose document is a scalar

    def walk(self):
        """Yield nested declarations depth-first, children before parents.

        Iterative, so arbitrarily deep trees do not hit the recursion limit.
        """
        pending = [iter(self.children)]
        path: list[Declaration] = []
        while pending:
            child = next(pending[-1], None)
            if child is None:
                pending.pop()
                if path:
                    yield path.pop()
                continue
            path.append(child)
            pending.append(iter(child.children))


def array_of(ref: TypeRef | None, depth: int) -> TypeRef | None:
    """Wrap *ref* in *depth* levels of ArrayOf."""
    for _ in range(depth):
        ref = ArrayOf(ref)
    return ref


def element_reference(ref: TypeRef | None) -> Reference | None:
    """Return the object reference at the bottom of an array type, if any."""
    while isinstance(ref, ArrayOf):
        ref = ref.element
    return ref if isinstance(ref, Reference) else None
