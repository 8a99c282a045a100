from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import tomllib

from primraster.colors import Color, coerce_color, validate_color
from primraster.primitives import Circle, Line, Primitive, Rectangle, Text
from primraster.scene import Scene


@dataclass(frozen=True)
class RenderConfig:
    width: int
    height: int
    color: Color = (255, 255, 255, 255)
    border: Color | None = None
    path: Path = Path("output.png")
    font_path: Path | None = None
    antialias: bool = True

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be > 0")
        object.__setattr__(self, "color", validate_color(self.color))
        if self.border is not None:
            object.__setattr__(self, "border", validate_color(self.border, "border"))
        object.__setattr__(self, "path", Path(self.path))
        if self.font_path is not None:
            object.__setattr__(self, "font_path", Path(self.font_path))


def load_scene_file(path: str | Path) -> tuple[RenderConfig, Scene]:
    """Read a ``[canvas]`` table and ``[[components]]`` list from a TOML file.

    Relative ``path`` and ``font_path`` values resolve against the file's
    directory.
    """
    scene_path = Path(path)
    if not scene_path.exists():
        raise FileNotFoundError(f"scene file not found: {scene_path}")
    with scene_path.open("rb") as f:
        raw = tomllib.load(f)

    canvas = raw.get("canvas")
    if not isinstance(canvas, dict):
        raise ValueError("scene file missing required table: canvas")
    config = parse_canvas(canvas, base_dir=scene_path.parent)

    components = raw.get("components", [])
    if not isinstance(components, list):
        raise ValueError("components must be an array of tables")
    scene = Scene(parse_component(item, index) for index, item in enumerate(components))
    return config, scene


def parse_canvas(raw: dict[str, object], *, base_dir: Path | None = None) -> RenderConfig:
    try:
        width = _coerce_int(raw["width"], "canvas.width")
        height = _coerce_int(raw["height"], "canvas.height")
    except KeyError as exc:
        raise ValueError(f"canvas missing required field: {exc.args[0]}") from exc
    color = coerce_color(raw.get("color", [255, 255, 255, 255]), "canvas.color")
    border_raw = raw.get("border")
    border = coerce_color(border_raw, "canvas.border") if border_raw is not None else None
    out_path = _resolve(_coerce_str(raw.get("path", "output.png"), "canvas.path"), base_dir)
    font_raw = raw.get("font_path")
    font_path = _resolve(_coerce_str(font_raw, "canvas.font_path"), base_dir) if font_raw is not None else None
    antialias = raw.get("antialias", True)
    if not isinstance(antialias, bool):
        raise ValueError("canvas.antialias must be a boolean")
    return RenderConfig(
        width=width,
        height=height,
        color=color,
        border=border,
        path=out_path,
        font_path=font_path,
        antialias=antialias,
    )


def parse_component(raw: object, index: int = 0) -> Primitive:
    if not isinstance(raw, dict):
        raise ValueError(f"components[{index}] must be a table")
    where = f"components[{index}]"
    kind = raw.get("kind")
    try:
        if kind == "circle":
            return Circle(
                cx=_coerce_int(raw["cx"], f"{where}.cx"),
                cy=_coerce_int(raw["cy"], f"{where}.cy"),
                radius=_coerce_int(raw["radius"], f"{where}.radius"),
                color=coerce_color(raw["color"], f"{where}.color"),
            )
        if kind == "rectangle":
            return Rectangle(
                x=_coerce_int(raw["x"], f"{where}.x"),
                y=_coerce_int(raw["y"], f"{where}.y"),
                width=_coerce_int(raw["width"], f"{where}.width"),
                height=_coerce_int(raw["height"], f"{where}.height"),
                color=coerce_color(raw["color"], f"{where}.color"),
            )
        if kind == "line":
            return Line(
                x1=_coerce_int(raw["x1"], f"{where}.x1"),
                y1=_coerce_int(raw["y1"], f"{where}.y1"),
                x2=_coerce_int(raw["x2"], f"{where}.x2"),
                y2=_coerce_int(raw["y2"], f"{where}.y2"),
                color=coerce_color(raw["color"], f"{where}.color"),
            )
        if kind == "text":
            border = None
            if "border_color" in raw or "border_width" in raw:
                border = (
                    coerce_color(raw["border_color"], f"{where}.border_color"),
                    _coerce_int(raw["border_width"], f"{where}.border_width"),
                )
            return Text(
                x=_coerce_int(raw["x"], f"{where}.x"),
                y=_coerce_int(raw["y"], f"{where}.y"),
                size=_coerce_int(raw["size"], f"{where}.size"),
                content=_coerce_str(raw["content"], f"{where}.content"),
                color=coerce_color(raw["color"], f"{where}.color"),
                border=border,
            )
    except KeyError as exc:
        raise ValueError(f"{where} missing required field: {exc.args[0]}") from exc
    raise ValueError(f"{where}.kind must be one of circle, rectangle, line, text (got {kind!r})")


def _coerce_int(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer")
    return value


def _coerce_str(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    return value


def _resolve(value: str, base_dir: Path | None) -> Path:
    p = Path(value).expanduser()
    if base_dir is not None and not p.is_absolute():
        return base_dir / p
    return p
