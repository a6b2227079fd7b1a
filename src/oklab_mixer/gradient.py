# gradient.py – start/end hex → ordered OKLab blend sequence

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .oklab import oklab_mix
from .srgb import Hex, format_hex_string, hex_to_linear, linear_to_hex
from .vec3 import Vec3

log = logging.getLogger(__name__)

DEFAULT_MIDPOINTS = 1


@dataclass(frozen=True)
class Step:
    index: int
    ratio: float
    color: Vec3  # linear RGB
    hex: Hex


def blend_steps(
    start: Hex, end: Hex, midpoint_count: Optional[int] = None
) -> List[Step]:
    """
    Blend `start` → `end` in OKLab.

    IMPORTANT: the effective count is midpoint_count + 1 and both endpoints
    are emitted, so the result holds midpoint_count + 2 steps at ratios
    i / (midpoint_count + 1). The default of 1 midpoint yields 3 steps.
    """
    if midpoint_count is None:
        midpoint_count = DEFAULT_MIDPOINTS
    if midpoint_count < 0:
        raise ValueError(f"midpoint count must be >= 0, got {midpoint_count}")

    a = hex_to_linear(start)
    b = hex_to_linear(end)
    n = int(midpoint_count) + 1

    out: List[Step] = []
    for i in range(n + 1):
        h = i / n
        rgb = oklab_mix(a, b, h)
        hex_i = linear_to_hex(rgb)
        log.debug("step %d  h=%.4f  %s", i, h, format_hex_string(hex_i))
        out.append(Step(i, h, rgb, hex_i))
    return out


def generate_sequence(
    start: Hex, end: Hex, midpoint_count: Optional[int] = None
) -> List[Hex]:
    return [s.hex for s in blend_steps(start, end, midpoint_count)]


__all__ = ["DEFAULT_MIDPOINTS", "Step", "blend_steps", "generate_sequence"]
