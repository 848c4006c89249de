"""ConversionResult — the value returned by convert()."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionResult:
    """Rendered declarations, or an empty content and an error message."""

    content: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, str]:
        """``{"content": ...}`` plus ``"error"`` only when the conversion failed."""
        if self.error is None:
            return {"content": self.content}
        return {"content": self.content, "error": self.error}
