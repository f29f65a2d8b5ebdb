"""S3: cube, capped cylinder and truncated cone on a floor."""

from __future__ import annotations

import math

from render_core.materials import Material
from render_core.shapes import cone, cube, cylinder, plane
from render_core.transforms import chain, color, rotation_y, scaling, translation
from render_core.world import TraceConfig, World
from scenes.common import camera_from_params, key_light


def build_world(params):
    floor = plane(material=Material(color=color(0.9, 0.9, 0.85), specular=0.0, reflective=params.get("floor_reflective", 0.0)))
    box = cube(
        chain(scaling(0.6, 0.6, 0.6), rotation_y(math.pi / 5), translation(-2.0, 0.6, 0.5)),
        Material(color=color(0.8, 0.3, 0.2), diffuse=0.7, specular=0.3),
    )
    can = cylinder(
        chain(scaling(0.6, 1.0, 0.6), translation(0.0, 0.0, 0.5)),
        Material(color=color(0.2, 0.5, 0.8), diffuse=0.7, specular=0.6, reflective=0.2),
        minimum=0.0,
        maximum=1.5,
        closed=True,
    )
    funnel = cone(
        chain(scaling(0.7, 1.0, 0.7), translation(2.0, 1.0, 0.5)),
        Material(color=color(0.9, 0.8, 0.2), diffuse=0.7, specular=0.3),
        minimum=-1.0,
        maximum=0.0,
        closed=True,
    )
    return World(
        objects=(floor, box, can, funnel),
        light=key_light(),
        config=TraceConfig(max_bounces=params.get("max_bounces", 3)),
    )


def build_camera(params):
    return camera_from_params(params, hsize=64, vsize=32, eye=(0.0, 2.5, -6.0), look_at=(0.0, 0.6, 0.5))


def build_sweep_params():
    return [{"case_id": "s3_primitives", "hsize": 64, "vsize": 32, "max_bounces": 3}]


def run_case(params):
    camera = build_camera(params)
    return camera, camera.render(build_world(params), max_bounces=params.get("max_bounces"))
