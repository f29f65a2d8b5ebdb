"""Common scene helpers."""

from __future__ import annotations

import math
from typing import Any, Mapping

from render_core.camera import Camera
from render_core.materials import PointLight
from render_core.transforms import WHITE, point, vector, view_transform


def make_camera(
    hsize: int,
    vsize: int,
    field_of_view: float = math.pi / 3,
    eye: tuple[float, float, float] = (0.0, 1.5, -5.0),
    look_at: tuple[float, float, float] = (0.0, 1.0, 0.0),
    up: tuple[float, float, float] = (0.0, 1.0, 0.0),
) -> Camera:
    return Camera(int(hsize), int(vsize), float(field_of_view), view_transform(point(*eye), point(*look_at), vector(*up)))


def camera_from_params(params: Mapping[str, Any], **defaults: Any) -> Camera:
    keys = ("hsize", "vsize", "field_of_view", "eye", "look_at", "up")
    merged = {**defaults, **{k: params[k] for k in keys if k in params}}
    return make_camera(**merged)


def key_light() -> PointLight:
    return PointLight(point(-10.0, 10.0, -10.0), WHITE.copy())
