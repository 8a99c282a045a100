from __future__ import annotations

from collections.abc import Sequence

Color = tuple[int, int, int, int]

RED: Color = (255, 0, 0, 255)
BLACK: Color = (0, 0, 0, 255)
PURPLE: Color = (150, 0, 150, 255)
GREEN: Color = (0, 255, 0, 255)
WHITE: Color = (255, 255, 255, 255)
TRANSPARENT: Color = (0, 0, 0, 0)


def validate_color(color: Sequence[int], field_name: str = "color") -> Color:
    if len(color) != 4:
        raise ValueError(f"{field_name} must have 4 channels (r, g, b, a)")
    out: list[int] = []
    for channel in color:
        if isinstance(channel, bool) or not isinstance(channel, int):
            raise ValueError(f"{field_name} channels must be integers")
        if channel < 0 or channel > 255:
            raise ValueError(f"{field_name} channels must be in [0, 255]")
        out.append(channel)
    return (out[0], out[1], out[2], out[3])


def coerce_color(value: object, field_name: str = "color") -> Color:
    """Accept ``[r, g, b]``, ``[r, g, b, a]``, ``"#rrggbb"`` or ``"#rrggbbaa"``."""
    if isinstance(value, str):
        text = value.strip().lstrip("#")
        if len(text) not in (6, 8):
            raise ValueError(f"{field_name} hex string must be #rrggbb or #rrggbbaa")
        try:
            channels = [int(text[i : i + 2], 16) for i in range(0, len(text), 2)]
        except ValueError as exc:
            raise ValueError(f"{field_name} is not a valid hex color: {value!r}") from exc
        if len(channels) == 3:
            channels.append(255)
        return validate_color(channels, field_name)
    if isinstance(value, (list, tuple)):
        channels = list(value)
        if len(channels) == 3:
            channels.append(255)
        return validate_color(channels, field_name)
    raise ValueError(f"{field_name} must be a list of channels or a hex string")
