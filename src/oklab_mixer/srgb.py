# srgb.py – sRGB transfer functions and 0xRRGGBB codec
#   - IEC 61966-2-1 companding, gamma 2.4 with the standard branch points
#   - uint24 ↔ linear RGB via shift/mask, round-half-up to 8 bits
#   - '#rrggbb' parse/format for the front ends

from __future__ import annotations

import logging
import string
from typing import Tuple, Union

import numpy as np

from .vec3 import Vec3

log = logging.getLogger(__name__)

Hex = int  # 0xRRGGBB
Channel = Union[float, np.ndarray]

# --- constants ---------------------------------------------------------------
SRGB_GAMMA = 2.4
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_SLOPE = 12.92


class InvalidFormat(ValueError):
    """A color string is not 6 hex digits with an optional leading '#'."""


# --- 1) companding -----------------------------------------------------------
def srgb_decode(c: Channel) -> Channel:
    """Gamma-encoded channel in [0,1] → linear light. Scalars stay scalars."""
    scalar = np.ndim(c) == 0
    v = np.atleast_1d(np.asarray(c, dtype=np.float64))
    m = v > SRGB_DECODE_THRESHOLD
    out = np.empty_like(v)
    out[m] = ((v[m] + 0.055) / 1.055) ** SRGB_GAMMA
    out[~m] = v[~m] / SRGB_SLOPE
    return float(out[0]) if scalar else out


def srgb_encode(c: Channel) -> Channel:
    """Linear light → gamma-encoded channel. Not clamped."""
    scalar = np.ndim(c) == 0
    v = np.atleast_1d(np.asarray(c, dtype=np.float64))
    m = v > SRGB_ENCODE_THRESHOLD
    out = np.empty_like(v)
    out[m] = 1.055 * np.power(v[m], 1 / SRGB_GAMMA) - 0.055
    out[~m] = v[~m] * SRGB_SLOPE
    return float(out[0]) if scalar else out


# --- 2) uint24 ↔ linear RGB --------------------------------------------------
def split_channels(hex_: Hex) -> Tuple[int, int, int]:
    return (hex_ >> 16) & 0xFF, (hex_ >> 8) & 0xFF, hex_ & 0xFF


def hex_to_linear(hex_: Hex) -> Vec3:
    rgb = np.array(split_channels(hex_), dtype=np.float64) / 255.0
    return srgb_decode(rgb)


def linear_to_hex(rgb: Vec3) -> Hex:
    # trunc(x*255 + 0.5) is round-half-up for x >= 0. Channels are clamped
    # to 0..255 and NaN becomes 0 so the result always fits in 24 bits.
    enc = srgb_encode(np.asarray(rgb, dtype=np.float64))
    q = np.trunc(enc * 255.0 + 0.5)
    if not np.all(np.isfinite(q)):
        log.debug("non-finite channel(s) %s encoded as 0", q)
        q = np.where(np.isnan(q), 0.0, q)
    r, g, b = (int(x) for x in np.clip(q, 0, 255))
    return (r << 16) | (g << 8) | b


# --- 3) '#rrggbb' strings ----------------------------------------------------
def parse_hex_string(s: str) -> Hex:
    """Parse 'RRGGBB' or '#RRGGBB' (any case) into 0xRRGGBB."""
    if not isinstance(s, str):
        raise InvalidFormat(f"invalid hex color: {s!r}")
    raw = s[1:] if s.startswith("#") else s
    if len(raw) != 6 or not all(ch in string.hexdigits for ch in raw):
        raise InvalidFormat(f"invalid hex color: {s!r}")
    return int(raw, 16)


def format_hex_string(hex_: Hex) -> str:
    r, g, b = split_channels(hex_)
    return f"#{r:02x}{g:02x}{b:02x}"


__all__ = [
    "Hex",
    "InvalidFormat",
    "srgb_decode",
    "srgb_encode",
    "split_channels",
    "hex_to_linear",
    "linear_to_hex",
    "parse_hex_string",
    "format_hex_string",
]
