"""S4: every pattern kind on simple geometry."""

from __future__ import annotations

import math

from render_core.materials import Material
from render_core.patterns import checkers_pattern, gradient_pattern, ring_pattern, stripe_pattern
from render_core.shapes import plane, sphere
from render_core.transforms import chain, color, rotation_y, rotation_z, scaling, translation
from render_core.world import TraceConfig, World
from scenes.common import camera_from_params, key_light


def build_world(params):
    floor = plane(material=Material(pattern=ring_pattern(color(0.9, 0.9, 0.9), color(0.3, 0.3, 0.6), scaling(0.5, 0.5, 0.5)), specular=0.0))
    striped = sphere(
        translation(-2.2, 1.0, 0.5),
        Material(pattern=stripe_pattern(color(0.9, 0.2, 0.2), color(0.9, 0.9, 0.9), chain(scaling(0.2, 0.2, 0.2), rotation_z(math.pi / 4)))),
    )
    graded = sphere(
        translation(0.0, 1.0, 0.5),
        Material(pattern=gradient_pattern(color(0.1, 0.2, 0.9), color(0.9, 0.9, 0.1), chain(scaling(2.0, 1.0, 1.0), translation(-1.0, 0.0, 0.0)))),
    )
    checked = sphere(
        translation(2.2, 1.0, 0.5),
        Material(pattern=checkers_pattern(color(0.1, 0.1, 0.1), color(0.9, 0.9, 0.9), chain(scaling(0.25, 0.25, 0.25), rotation_y(0.3)))),
    )
    return World(
        objects=(floor, striped, graded, checked),
        light=key_light(),
        config=TraceConfig(max_bounces=params.get("max_bounces", 1)),
    )


def build_camera(params):
    return camera_from_params(params, hsize=64, vsize=32, eye=(0.0, 2.0, -6.0), look_at=(0.0, 1.0, 0.5))


def build_sweep_params():
    return [{"case_id": "s4_patterns", "hsize": 64, "vsize": 32, "max_bounces": 1}]


def run_case(params):
    camera = build_camera(params)
    return camera, camera.render(build_world(params), max_bounces=params.get("max_bounces"))
