from __future__ import annotations

import argparse
from dataclasses import replace
import logging
from pathlib import Path
import sys

from primraster import RenderError, load_scene_file, render_to_file
from primraster.primitives import Circle, Line, Rectangle, Text


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="primraster")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("render", help="Render a scene file (TOML: [canvas] + [[components]]) to PNG.")
    run.add_argument("scene", type=Path)
    run.add_argument("--output", type=Path, default=None, help="Override canvas.path from the scene file.")
    run.add_argument(
        "--no-antialias",
        action="store_true",
        help="Use aliased circles and slope-scan lines instead of supersampling and Wu lines.",
    )

    info = sub.add_parser("info", help="Print the canvas and component summary of a scene file.")
    info.add_argument("scene", type=Path)
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        config, scene = load_scene_file(args.scene)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.command == "render":
        if args.output is not None:
            config = replace(config, path=args.output)
        if args.no_antialias:
            config = replace(config, antialias=False)
        try:
            out = render_to_file(scene, config)
        except (RenderError, OSError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print(out)
        return 0

    if args.command == "info":
        border = "none" if config.border is None else str(config.border)
        print(f"canvas: {config.width}x{config.height} color={config.color} border={border}")
        print(f"output: {config.path}")
        print(f"font: {config.font_path if config.font_path is not None else 'none'}")
        counts = {"circle": 0, "rectangle": 0, "line": 0, "text": 0}
        for primitive in scene:
            counts[_kind(primitive)] += 1
        print("components: " + " ".join(f"{k}={v}" for k, v in counts.items()) + f" total={len(scene)}")
        return 0

    raise RuntimeError(f"unsupported command: {args.command}")


def _kind(primitive: object) -> str:
    match primitive:
        case Circle():
            return "circle"
        case Rectangle():
            return "rectangle"
        case Line():
            return "line"
        case Text():
            return "text"
    raise TypeError(f"unsupported primitive: {type(primitive).__name__}")


if __name__ == "__main__":
    sys.exit(main())
