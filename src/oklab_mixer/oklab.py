# oklab.py – blend two linear-RGB colors in the OKLab cube-root LMS domain
#   - linear RGB → LMS → ∛ → lerp → ³ → linear RGB
#   - lerp in ∛LMS equals lerp in OKLab (the L,a,b step is linear)

from __future__ import annotations

import logging

import numpy as np

from .vec3 import Vec3, lerp, mat3, multiply, power

log = logging.getLogger(__name__)

# --- basis-change matrices ---------------------------------------------------
# Row-major, 10 significant digits. Changing a digit changes output hexes.
CONE_TO_LMS = mat3(
    [
        [0.4121656120, 0.2118591070, 0.0883097947],
        [0.5362752080, 0.6807189584, 0.2818474174],
        [0.0514575653, 0.1074065790, 0.6302613616],
    ]
)

LMS_TO_CONE = mat3(
    [
        [4.0767245293, -1.2681437731, -0.0041119885],
        [-3.3072168827, 2.6093323231, -0.7034763098],
        [0.2307590544, -0.3411344290, 1.7068625689],
    ]
)


def to_lms_cbrt(rgb: Vec3) -> Vec3:
    # negative cone response → NaN; not clamped
    return power(multiply(CONE_TO_LMS, rgb), 1.0 / 3.0)


def from_lms_cbrt(lms_: Vec3) -> Vec3:
    return multiply(LMS_TO_CONE, lms_ * lms_ * lms_)


def oklab_mix(rgb_a: Vec3, rgb_b: Vec3, h: float) -> Vec3:
    """
    Mix two linear-RGB colors at ratio h (0 → a, 1 → b) through OKLab.

    The result is linear RGB and may fall outside [0,1] per channel.
    """
    lms_ = lerp(to_lms_cbrt(rgb_a), to_lms_cbrt(rgb_b), h)
    out = from_lms_cbrt(lms_)
    if not np.all(np.isfinite(out)):
        log.warning("oklab_mix produced non-finite color %s (h=%.4f)", out, h)
    return out


__all__ = ["CONE_TO_LMS", "LMS_TO_CONE", "to_lms_cbrt", "from_lms_cbrt", "oklab_mix"]
