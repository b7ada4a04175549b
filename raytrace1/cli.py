"""Command line: render a scene file to a PPM image."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from .render import render, save_ppm
from .scene import WRONG_CHARACTER, SceneError, load_scene

USAGE = "Usage: raytrace1 file.scene [output.ppm]"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the scene named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) not in (1, 2):
        print(USAGE)
        return 1
    scene_path = Path(args[0])
    output = Path(args[1]) if len(args) == 2 else scene_path.with_suffix(".ppm")
    try:
        scene = load_scene(scene_path)
    except OSError:
        print(USAGE)
        return 1
    except UnicodeDecodeError:
        print(f"Error: {WRONG_CHARACTER}")
        return 1
    except SceneError as exc:
        print(f"Error: {exc}")
        return 1
    try:
        pixels = render(scene)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    try:
        save_ppm(pixels, scene.width, scene.height, output)
    except OSError as exc:
        print(f"Error: cannot write {output}: {exc.strerror}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())