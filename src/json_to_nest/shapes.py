"""SeenShapes — remembers emitted object shapes for deduplication."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SeenShapes:
    """Tracks which key sets were declared, and under which names.

    Only the *last* shape declared under a field name is remembered.  A field
    name seen before is compared against that shape alone; a field name seen
    for the first time may reuse any identical shape declared earlier.
    """

    by_field: dict[str, tuple[frozenset[str], str]] = field(default_factory=dict)
    by_shape: dict[frozenset[str], str] = field(default_factory=dict)

    def existing_name(self, field_name: str, keys: frozenset[str]) -> str | None:
        """Return the declared name to reuse for this shape, or None."""
        if field_name in self.by_field:
            last_keys, name = self.by_field[field_name]
            return name if last_keys == keys else None
        name = self.by_shape.get(keys)
        if name is not None:
            self.by_field[field_name] = (keys, name)
        return name

    def record(self, field_name: str, keys: frozenset[str], name: str) -> None:
        self.by_field[field_name] = (keys, name)
        self.by_shape.setdefault(keys, name)
