"""Render one registered scene to PPM (and optionally PNG / HDF5).

Usage:
    python -m scripts.render --scene S1 --width 160 --height 90 --out artifacts/s1.ppm
"""

from __future__ import annotations

import argparse
from pathlib import Path

from plots import preview
from render_io.hdf5_io import CaseData, save_render_hdf5
from render_io.ppm import save_ppm
from scenes.runner import SCENE_MODULES, load_scene


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a demo scene.")
    parser.add_argument("--scene", default="S1", choices=sorted(SCENE_MODULES), help="Scene id")
    parser.add_argument("--width", type=int, default=None, help="Horizontal pixel count")
    parser.add_argument("--height", type=int, default=None, help="Vertical pixel count")
    parser.add_argument("--bounces", type=int, default=None, help="Reflection/refraction budget")
    parser.add_argument("--case", default=None, help="Sweep case id (defaults to the first case)")
    parser.add_argument("--out", default="artifacts/render.ppm", help="Output PPM path")
    parser.add_argument("--png", default=None, help="Directory for a PNG/PDF preview")
    parser.add_argument("--h5", default=None, help="HDF5 archive path")
    parser.add_argument("--quiet", action="store_true", help="Do not print row progress")
    args = parser.parse_args()

    mod = load_scene(args.scene)
    cases = mod.build_sweep_params()
    params = next((c for c in cases if c["case_id"] == args.case), None) if args.case else cases[0]
    if params is None:
        parser.error(f"unknown case {args.case!r} for scene {args.scene}")
    params = dict(params)
    if args.width is not None:
        params["hsize"] = args.width
    if args.height is not None:
        params["vsize"] = args.height
    if args.bounces is not None:
        params["max_bounces"] = args.bounces

    camera = mod.build_camera(params)
    world = mod.build_world(params)

    def _progress(row: int, total: int) -> None:
        print(f"\rrow {row + 1}/{total}", end="", flush=True)

    canvas = camera.render(world, max_bounces=params.get("max_bounces"), progress=None if args.quiet else _progress)
    if not args.quiet:
        print()

    print(save_ppm(args.out, canvas))
    if args.png:
        print(preview.show_canvas(canvas, args.png, Path(args.out).stem, title=f"{args.scene}:{params['case_id']}"))
    if args.h5:
        Path(args.h5).parent.mkdir(parents=True, exist_ok=True)
        save_render_hdf5(args.h5, {args.scene: {params["case_id"]: CaseData(params=params, canvas=canvas, camera=camera)}})
        print(args.h5)


if __name__ == "__main__":
    main()
