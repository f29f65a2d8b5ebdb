"""S0: the reference world of two concentric spheres."""

from __future__ import annotations

import math

from render_core.world import TraceConfig, default_world
from scenes.common import camera_from_params


def build_world(params):
    return default_world(TraceConfig(max_bounces=params.get("max_bounces", 5)))


def build_camera(params):
    return camera_from_params(params, hsize=11, vsize=11, field_of_view=math.pi / 2, eye=(0.0, 0.0, -5.0), look_at=(0.0, 0.0, 0.0))


def build_sweep_params():
    return [{"case_id": "s0_reference", "hsize": 11, "vsize": 11, "max_bounces": 5}]


def run_case(params):
    camera = build_camera(params)
    return camera, camera.render(build_world(params), max_bounces=params.get("max_bounces"))
