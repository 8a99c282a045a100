from __future__ import annotations

from collections.abc import Iterable, Iterator

from primraster.primitives import Circle, Line, Primitive, Rectangle, Text


_PRIMITIVE_TYPES = (Circle, Rectangle, Line, Text)


class Scene:
    """Ordered primitives; later entries paint over earlier ones."""

    def __init__(self, primitives: Iterable[Primitive] = ()) -> None:
        self._primitives: list[Primitive] = []
        self.extend(primitives)

    def add(self, primitive: Primitive) -> "Scene":
        if not isinstance(primitive, _PRIMITIVE_TYPES):
            raise TypeError(f"unsupported primitive: {type(primitive).__name__}")
        self._primitives.append(primitive)
        return self

    def extend(self, primitives: Iterable[Primitive]) -> "Scene":
        for primitive in primitives:
            self.add(primitive)
        return self

    @property
    def primitives(self) -> tuple[Primitive, ...]:
        return tuple(self._primitives)

    def has_text(self) -> bool:
        return any(isinstance(p, Text) for p in self._primitives)

    def __iter__(self) -> Iterator[Primitive]:
        return iter(tuple(self._primitives))

    def __len__(self) -> int:
        return len(self._primitives)
