"""S1: three spheres on a reflective checkered floor."""

from __future__ import annotations

from render_core.materials import Material
from render_core.patterns import checkers_pattern
from render_core.shapes import plane, sphere
from render_core.transforms import chain, color, rotation_x, scaling, translation
from render_core.world import TraceConfig, World
from scenes.common import camera_from_params, key_light


def build_world(params):
    floor = plane(
        material=Material(
            pattern=checkers_pattern(color(0.35, 0.35, 0.35), color(0.65, 0.65, 0.65)),
            specular=0.0,
            reflective=params.get("floor_reflective", 0.4),
        )
    )
    back_wall = plane(chain(rotation_x(1.5708), translation(0.0, 0.0, 8.0)), Material(color=color(0.6, 0.7, 0.9), specular=0.0))
    middle = sphere(translation(-0.5, 1.0, 0.5), Material(color=color(0.1, 1.0, 0.5), diffuse=0.7, specular=0.3, reflective=0.1))
    right = sphere(chain(scaling(0.5, 0.5, 0.5), translation(1.5, 0.5, -0.5)), Material(color=color(0.5, 1.0, 0.1), diffuse=0.7, specular=0.3))
    mirror = sphere(
        chain(scaling(0.33, 0.33, 0.33), translation(-1.5, 0.33, -0.75)),
        Material(color=color(0.1, 0.1, 0.1), diffuse=0.2, specular=1.0, shininess=300.0, reflective=0.9),
    )
    return World(
        objects=(floor, back_wall, middle, right, mirror),
        light=key_light(),
        config=TraceConfig(max_bounces=params.get("max_bounces", 5)),
    )


def build_camera(params):
    return camera_from_params(params, hsize=64, vsize=36)


def build_sweep_params():
    return [{"case_id": f"s1_bounces_{b}", "hsize": 64, "vsize": 36, "max_bounces": b} for b in (0, 1, 4)]


def run_case(params):
    camera = build_camera(params)
    return camera, camera.render(build_world(params), max_bounces=params.get("max_bounces"))
