"""S2: a hollow glass sphere (air bubble inside) over a checkered floor."""

from __future__ import annotations

from render_core.materials import GLASS, VACUUM, WATER, Material
from render_core.patterns import checkers_pattern
from render_core.shapes import plane, sphere
from render_core.transforms import chain, color, scaling, translation
from render_core.world import TraceConfig, World
from scenes.common import camera_from_params, key_light

INDICES = {"glass": GLASS, "water": WATER}


def build_world(params):
    index = INDICES[params.get("medium", "glass")]
    floor = plane(
        translation(0.0, -1.0, 0.0),
        Material(pattern=checkers_pattern(color(0.15, 0.15, 0.15), color(0.85, 0.85, 0.85)), specular=0.0),
    )
    shell = sphere(
        material=Material(
            color=color(0.0, 0.0, 0.0),
            ambient=0.0,
            diffuse=0.1,
            specular=1.0,
            shininess=300.0,
            reflective=0.9,
            transparency=0.9,
            refractive_index=index,
        )
    )
    bubble = sphere(
        scaling(0.5, 0.5, 0.5),
        Material(
            color=color(0.0, 0.0, 0.0),
            ambient=0.0,
            diffuse=0.1,
            specular=1.0,
            shininess=300.0,
            reflective=0.9,
            transparency=0.9,
            refractive_index=VACUUM,
        ),
    )
    backdrop = sphere(chain(scaling(0.6, 0.6, 0.6), translation(1.8, -0.4, 3.0)), Material(color=color(0.9, 0.2, 0.2)))
    return World(
        objects=(floor, shell, bubble, backdrop),
        light=key_light(),
        config=TraceConfig(max_bounces=params.get("max_bounces", 5)),
    )


def build_camera(params):
    return camera_from_params(params, hsize=48, vsize=48, eye=(0.0, 1.0, -4.5), look_at=(0.0, 0.0, 0.0))


def build_sweep_params():
    return [{"case_id": f"s2_{m}", "hsize": 48, "vsize": 48, "medium": m, "max_bounces": 5} for m in INDICES]


def run_case(params):
    camera = build_camera(params)
    return camera, camera.render(build_world(params), max_bounces=params.get("max_bounces"))
