"""Scene sweep runner + auto preview + validation report."""

from __future__ import annotations

from importlib import import_module
from pathlib import Path
import time
from typing import Dict, List

import numpy as np

from analysis.canvas_stats import canvas_summary
from plots import preview
from render_io.hdf5_io import CaseData, save_render_hdf5
from render_io.ppm import save_ppm

SCENE_MODULES = {
    "S0": "scenes.S0_default_world",
    "S1": "scenes.S1_mirror_room",
    "S2": "scenes.S2_glass",
    "S3": "scenes.S3_primitives",
    "S4": "scenes.S4_patterns",
}

# center pixel of the S0 reference render
S0_CENTER = np.array([0.38066, 0.47583, 0.2855])


def load_scene(scene_id: str):
    try:
        return import_module(SCENE_MODULES[scene_id])
    except KeyError:
        raise ValueError(f"Unknown scene: {scene_id} (known: {sorted(SCENE_MODULES)})") from None


def run_all(
    out_h5: str = "artifacts/renders.h5",
    out_plot_dir: str = "artifacts/plots",
    scene_ids: List[str] | None = None,
) -> str:
    payload: Dict[str, Dict[str, CaseData]] = {}
    report_lines: List[str] = [
        "# Validation Report",
        "",
        "- luminance: Rec. 709 weights over unclamped linear rgb",
        "- clipped: fraction of pixels with any channel > 1.0",
        "",
    ]
    failures: List[str] = []
    s1_luminance: Dict[int, float] = {}

    for sid in scene_ids or list(SCENE_MODULES):
        mod = load_scene(sid)
        payload[sid] = {}
        report_lines.append(f"## {sid}")
        for p in mod.build_sweep_params():
            case_id = p["case_id"]
            started = time.perf_counter()
            camera, canvas = mod.run_case(p)
            elapsed = time.perf_counter() - started
            payload[sid][case_id] = CaseData(params=p, canvas=canvas, camera=camera)

            stats = canvas_summary(canvas)
            case_dir = str(Path(out_plot_dir) / sid / case_id)
            png = preview.show_canvas(canvas, case_dir, "render", title=f"{sid}:{case_id}")
            hist = preview.channel_histogram(canvas, case_dir)
            ppm = save_ppm(str(Path(case_dir) / "render.ppm"), canvas)

            mean_rgb = [round(float(v), 5) for v in stats["mean_rgb"]]
            report_lines.append(
                f"- case `{case_id}`: {canvas.width}x{canvas.height}, bounces={p.get('max_bounces')}, time={elapsed:.2f} s"
            )
            report_lines.append(
                f"  - mean rgb={mean_rgb}, mean luminance={stats['mean_luminance']:.5f}, "
                f"max channel={stats['max_channel']:.5f}, clipped={stats['clipped_fraction']:.3f}, black={stats['black_fraction']:.3f}"
            )
            report_lines.append(f"  - outputs: [render]({png}), [histogram]({hist}), [ppm]({ppm})")

            if sid == "S0" and canvas.width == 11 and canvas.height == 11:
                center = canvas.pixel_at(5, 5)
                if not np.allclose(center, S0_CENTER, atol=1e-5):
                    failures.append(f"S0:{case_id} center pixel {center.tolist()} != {S0_CENTER.tolist()}")
            if sid == "S1":
                s1_luminance[int(p.get("max_bounces", 0))] = stats["mean_luminance"]
            if not np.all(np.isfinite(canvas.pixels)):
                failures.append(f"{sid}:{case_id} contains non-finite pixels")

        report_lines.append("")

    # S1 sanity check: extra bounces only add reflected light.
    bounces = sorted(s1_luminance)
    for lo, hi in zip(bounces, bounces[1:]):
        if s1_luminance[hi] + 1e-9 < s1_luminance[lo]:
            failures.append(
                f"S1 mean luminance dropped from {s1_luminance[lo]:.5f} (bounces={lo}) to {s1_luminance[hi]:.5f} (bounces={hi})"
            )

    Path(out_h5).parent.mkdir(parents=True, exist_ok=True)
    save_render_hdf5(out_h5, payload)

    report_lines.append("## Failure Checks")
    if failures:
        for msg in failures:
            report_lines.append(f"- FAIL: {msg}")
    else:
        report_lines.append("- PASS: No automatic failure checks triggered.")

    report_path = Path(out_plot_dir).parent / "report.md"
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text("\n".join(report_lines), encoding="utf-8")
    return str(report_path)


if __name__ == "__main__":
    print(run_all())
