from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from primraster.colors import Color, validate_color


def _check_unsigned(**fields: int) -> None:
    for name, value in fields.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer")
        if value < 0:
            raise ValueError(f"{name} must be >= 0")


@dataclass(frozen=True)
class Circle:
    cx: int
    cy: int
    radius: int
    color: Color

    def __post_init__(self) -> None:
        _check_unsigned(cx=self.cx, cy=self.cy, radius=self.radius)
        object.__setattr__(self, "color", validate_color(self.color))


@dataclass(frozen=True)
class Rectangle:
    x: int
    y: int
    width: int
    height: int
    color: Color

    def __post_init__(self) -> None:
        _check_unsigned(x=self.x, y=self.y, width=self.width, height=self.height)
        object.__setattr__(self, "color", validate_color(self.color))


@dataclass(frozen=True)
class Line:
    x1: int
    y1: int
    x2: int
    y2: int
    color: Color

    def __post_init__(self) -> None:
        _check_unsigned(x1=self.x1, y1=self.y1, x2=self.x2, y2=self.y2)
        object.__setattr__(self, "color", validate_color(self.color))


@dataclass(frozen=True)
class Text:
    x: int
    y: int
    size: int
    content: str
    color: Color
    border: tuple[Color, int] | None = None

    def __post_init__(self) -> None:
        _check_unsigned(x=self.x, y=self.y, size=self.size)
        if self.size == 0:
            raise ValueError("size must be > 0")
        object.__setattr__(self, "color", validate_color(self.color))
        if self.border is not None:
            border_color, border_width = self.border
            _check_unsigned(border_width=border_width)
            object.__setattr__(self, "border", (validate_color(border_color, "border color"), border_width))


Primitive: TypeAlias = Circle | Rectangle | Line | Text
