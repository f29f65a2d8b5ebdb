"""HDF5 archive of rendered canvases.

The schema stores multiple scenes and multiple sweep cases per scene.

Structure:
    /
      meta                        (attrs: created_at, color_space, convention)
      scenes/{scene_id}/cases/{case_id}/
          params_json             (scalar utf-8 JSON)
          pixels                  (H,W,3) float64, unclamped linear rgb
          camera                  (attrs: hsize, vsize, field_of_view)
          camera/transform        (4,4)

Example:
    >>> import numpy as np
    >>> from render_core.canvas import Canvas
    >>> from render_io.hdf5_io import load_render_hdf5, save_render_hdf5
    >>> c = Canvas(4, 2)
    >>> c.write(1, 1, [0.5, 1.5, 0.0])
    >>> payload = {"S0": {"case0": {"params": {"max_bounces": 5}, "canvas": c}}}
    >>> save_render_hdf5("/tmp/render_example.h5", payload)
    >>> loaded, meta = load_render_hdf5("/tmp/render_example.h5")
    >>> loaded["S0"]["case0"].canvas.pixels.shape, meta.color_space
    ((2, 4, 3), 'linear')
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import json
from typing import Any, Dict, Mapping, Optional, Tuple

import h5py
import numpy as np

from render_core.camera import Camera
from render_core.canvas import Canvas


@dataclass
class CaseData:
    params: Dict[str, Any]
    canvas: Canvas
    camera: Optional[Camera] = None


@dataclass
class Hdf5Meta:
    created_at: str
    color_space: str
    convention: str


def _json_default(obj: Any) -> Any:
    if isinstance(obj, (np.integer, np.floating)):
        return obj.item()
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    raise TypeError(f"Unsupported JSON type: {type(obj)}")


def save_render_hdf5(
    filepath: str,
    scenes: Mapping[str, Mapping[str, CaseData | Mapping[str, Any]]],
    color_space: str = "linear",
    convention: str = "row-major, y down",
) -> None:
    """Save rendered canvases using a fixed schema contract."""

    with h5py.File(filepath, "w") as h5:
        meta = h5.create_group("meta")
        meta.attrs["created_at"] = datetime.now(timezone.utc).isoformat()
        meta.attrs["color_space"] = color_space
        meta.attrs["convention"] = convention

        g_scenes = h5.create_group("scenes")
        for scene_id, cases in scenes.items():
            g_cases = g_scenes.create_group(str(scene_id)).create_group("cases")
            for case_id, case in cases.items():
                case_obj = (
                    case
                    if isinstance(case, CaseData)
                    else CaseData(params=dict(case["params"]), canvas=case["canvas"], camera=case.get("camera"))
                )
                g_case = g_cases.create_group(str(case_id))
                g_case.create_dataset("params_json", data=json.dumps(case_obj.params, default=_json_default))
                g_case.create_dataset("pixels", data=np.asarray(case_obj.canvas.pixels, dtype=np.float64))

                if case_obj.camera is not None:
                    cam = case_obj.camera
                    g_cam = g_case.create_group("camera")
                    g_cam.attrs["hsize"] = int(cam.hsize)
                    g_cam.attrs["vsize"] = int(cam.vsize)
                    g_cam.attrs["field_of_view"] = float(cam.field_of_view)
                    g_cam.create_dataset("transform", data=np.asarray(cam.transform, dtype=np.float64))


def load_render_hdf5(filepath: str) -> Tuple[Dict[str, Dict[str, CaseData]], Hdf5Meta]:
    """Load an archive written by ``save_render_hdf5``."""

    scenes: Dict[str, Dict[str, CaseData]] = {}
    with h5py.File(filepath, "r") as h5:
        meta = Hdf5Meta(
            created_at=str(h5["meta"].attrs.get("created_at", "")),
            color_space=str(h5["meta"].attrs.get("color_space", "linear")),
            convention=str(h5["meta"].attrs.get("convention", "row-major, y down")),
        )

        for scene_id, g_scene in h5["scenes"].items():
            scenes[scene_id] = {}
            for case_id, g_case in g_scene["cases"].items():
                raw = g_case["params_json"][()]
                params = json.loads(raw.decode() if isinstance(raw, bytes) else raw)
                canvas = Canvas.from_array(np.asarray(g_case["pixels"][()], dtype=np.float64))

                camera = None
                if "camera" in g_case:
                    g_cam = g_case["camera"]
                    camera = Camera(
                        int(g_cam.attrs["hsize"]),
                        int(g_cam.attrs["vsize"]),
                        float(g_cam.attrs["field_of_view"]),
                        np.asarray(g_cam["transform"][()], dtype=np.float64),
                    )
                scenes[scene_id][case_id] = CaseData(params=params, canvas=canvas, camera=camera)

    return scenes, meta


def self_test_roundtrip(filepath: str, atol: float = 1e-12) -> bool:
    """Write->read equivalence self-test on a random unclamped canvas."""

    rng = np.random.default_rng(7)
    canvas = Canvas.from_array(rng.uniform(-0.5, 2.0, size=(6, 8, 3)))
    payload = {"selftest": {"case0": CaseData(params={"seed": 7}, canvas=canvas)}}
    save_render_hdf5(filepath, payload)
    scenes, _ = load_render_hdf5(filepath)
    loaded = scenes["selftest"]["case0"]
    return bool(np.allclose(canvas.pixels, loaded.canvas.pixels, atol=atol) and loaded.params == {"seed": 7})
