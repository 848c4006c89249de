"""Output mode and rendering options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Mode(str, Enum):
    INTERFACE = "interface"
    DTO = "dto"

    @classmethod
    def parse(cls, value: "str | Mode") -> "Mode":
        """Anything other than ``"interface"`` selects the DTO form."""
        if isinstance(value, Mode):
            return value
        return cls.INTERFACE if value == cls.INTERFACE.value else cls.DTO


@dataclass(frozen=True)
class RenderOptions:
    """Naming and layout settings for the emitted declarations."""

    mode: Mode = Mode.INTERFACE
    indent: str = "  "
    root_name: str = "Parent"
    dto_suffix: str = "Dto"

    # Declaration keyword per mode: "export interface X" / "export class XDto"
    interface_kind: str = "interface"
    dto_kind: str = "class"

    @property
    def is_dto(self) -> bool:
        return self.mode is Mode.DTO

    @property
    def kind(self) -> str:
        return self.dto_kind if self.is_dto else self.interface_kind

    @property
    def name_suffix(self) -> str:
        return self.dto_suffix if self.is_dto else ""
