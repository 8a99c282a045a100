from __future__ import annotations

import argparse
from pathlib import Path

from primraster import BLACK, WHITE, Circle, Image, RenderConfig, Text


def main() -> None:
    parser = argparse.ArgumentParser(description="Render outlined text over three blended circles.")
    parser.add_argument("font", type=Path, help="Path to a .ttf/.otf font file.")
    parser.add_argument("--output", type=Path, default=Path("text_badge.png"))
    args = parser.parse_args()

    config = RenderConfig(300, 100, color=(255, 255, 255, 0), path=args.output, font_path=args.font)
    out = (
        Image()
        .config(config)
        .init()
        .add_components(
            [
                Circle(50, 55, 30, (255, 0, 0, 200)),
                Circle(75, 55, 30, (0, 255, 0, 200)),
                Circle(65, 35, 30, (0, 0, 255, 200)),
                Text(config.width // 2 - 40, config.height // 2 - 25, 50, "BADGE", WHITE, border=(BLACK, 3)),
            ]
        )
        .draw()
    )
    print(out)


if __name__ == "__main__":
    main()
