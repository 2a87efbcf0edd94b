"""Geometry and post-processing plans used by the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping

Vec2 = tuple[float, float]

CIRCLE_SEGMENTS = 30
FINAL_SHADER = "post_default"

_PI = 3.1415926535

_RESOLUTION = "iResolution"
_TIME = "iTime"
_BLOOM_RESOLUTION = "uResolution"


@dataclass(frozen=True)
class ShaderPass:
    """One full-screen post-processing pass.

    ``constants`` are uniforms with fixed values; ``inputs`` name uniforms
    whose values come from the running game (window size, music time).
    """

    shader: str
    constants: Mapping[str, Any] = field(default_factory=dict)
    inputs: tuple[str, ...] = ()


def _bloom(threshold: float, intensity: float) -> dict[str, Any]:
    return {
        "uSceneTexture": 0,
        "uThreshold": threshold,
        "uBlurDirection": (1.0, 1.0),
        "uBloomIntensity": intensity,
    }


def circle_line_positions(
    segments: int = CIRCLE_SEGMENTS, radius: float = 1.0
) -> list[Vec2]:
    """Points of a closed circle outline, counter-clockwise from angle zero."""
    if segments <= 0:
        raise ValueError("a circle needs at least one segment")
    step = 2.0 * _PI / segments
    return [
        (radius * math.cos(i * step), radius * math.sin(i * step))
        for i in range(segments)
    ]


def quad_uv(
    texel_position: Vec2, frame_size: Vec2, texture_size: Vec2
) -> tuple[float, float, float, float]:
    """Texture coordinates (left_u, top_v, right_u, bottom_v) of a frame."""
    width, height = texture_size
    if width == 0 or height == 0:
        raise ValueError("texture size must be non-zero")
    x, y = texel_position
    frame_w, frame_h = frame_size
    return (
        x / width,
        y / height,
        (x + frame_w) / width,
        (y + frame_h) / height,
    )


def post_process_passes(state_name: str, is_title: bool = False) -> list[ShaderPass]:
    """Post-processing passes for a game state, in the order they run.

    The final pass-through with ``FINAL_SHADER`` always follows and is not
    listed. States without effects get an empty list.
    """
    if state_name == "Mode2":
        return [ShaderPass("post_bloom", _bloom(0.71, 1.1), (_BLOOM_RESOLUTION,))]
    if state_name == "Mode1":
        # The distortion pass also receives the bloom uniforms.
        return [
            ShaderPass(
                "post_underwater_distortion",
                _bloom(0.8, 1.1),
                (_RESOLUTION, _TIME, _BLOOM_RESOLUTION),
            ),
            ShaderPass("post_bloom", _bloom(0.8, 1.1), (_BLOOM_RESOLUTION,)),
            ShaderPass(
                "under_water_god_ray", {"uSceneTexture": 0}, (_RESOLUTION, _TIME)
            ),
        ]
    if state_name == "Title":
        if is_title:
            return [ShaderPass("post_bloom", _bloom(0.81, 0.1), (_BLOOM_RESOLUTION,))]
        return [
            ShaderPass("title_gradation", {}, (_RESOLUTION, _TIME)),
            ShaderPass("title_ripple", {}, (_RESOLUTION, _TIME)),
        ]
    return []