"""Primitive building blocks for train prefabs.

Every other builder composes these. A Prefab Node is a plain dict using the
host engine's PascalCase field names:

    {
        "Prefab": "CoasterCarBase",          # referenced template (optional)
        "Components": {"Transform": {...}},  # component name -> data
        "Properties": {"ModelName": {"Default": "..."}},
        "Children": {"Wheel1": {...}},       # child name -> Prefab Node
    }

Conventions:
    - Vectors are 3-tuples of floats (immutable, safe to share)
    - Rotations are Euler angles in radians
    - Relative paths count hierarchy levels up from the referencing node,
      e.g. 3 -> "../../.."
    - Repeated children are named with a 1-based index: Wheel1, Wheel2, ...
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence
from typing import Any

import numpy as np

log = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]
PrefabNode = dict[str, Any]

ZERO: Vec3 = (0.0, 0.0, 0.0)

# ---------------------------------------------------------------------------
# Platform names
# ---------------------------------------------------------------------------

BOGIE_CAR_PLATFORM = "BogCar"
FRONT_CAR_PLATFORM = "CarF"
# {1} is filled in by the host with the car index, giving each mid car its own platform
MID_CAR_PLATFORM = "CarM{1}"
REAR_CAR_PLATFORM = "CarR"

# ---------------------------------------------------------------------------
# Base prefab names
# ---------------------------------------------------------------------------

BASE_CAR_PREFAB = "CoasterCarBase"
BASE_WHEEL_ASSEMBLY_PREFAB = "CoasterCarAnimatedWheelBase"
WHEEL_BASE_PREFAB = "CC_Mod_Wheel_Base"
ATTACH_POINT_PREFAB = "AttachPoint"


def vec3(value: Sequence[float] | np.ndarray) -> Vec3:
    """Coerce a 3-element sequence or array into a tuple of Python floats."""
    arr = np.asarray(value, dtype=float).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"Expected 3 components, got {arr.size}: {value!r}")
    return (float(arr[0]), float(arr[1]), float(arr[2]))


def transform(position: Any, rotation: Any, scale: Any) -> dict[str, Any]:
    """Transform component data.

    Values are neither defaulted nor checked. They are copied, so a list or
    array reused across calls never ends up shared between results.
    """
    return {
        "Position": copy.deepcopy(position),
        "Rotation": copy.deepcopy(rotation),
        "Scale": copy.deepcopy(scale),
    }


def zero_transform() -> dict[str, Any]:
    """Identity transform: origin, no rotation, unit scale."""
    return transform(ZERO, ZERO, 1.0)


def hex_color_to_normalized_color(hex_code: str, *, strict: bool = False) -> Vec3:
    """Convert "#RRGGBB" (or "RRGGBB") to an (r, g, b) triple in [0, 1].

    Input is not validated unless *strict* is set; a short string fails
    wherever int() fails and trailing characters past six are ignored.
    """
    if hex_code.startswith("#"):
        hex_code = hex_code[1:]

    if strict and (
        len(hex_code) != 6 or any(c not in "0123456789abcdefABCDEF" for c in hex_code)
    ):
        log.debug("Rejected colour hex %r", hex_code)
        raise ValueError(
            f"Colour must be exactly 6 hex digits (optionally prefixed with '#'), "
            f"got {hex_code!r}"
        )

    rgb = np.array(
        [int(hex_code[0:2], 16), int(hex_code[2:4], 16), int(hex_code[4:6], 16)],
        dtype=float,
    )
    return vec3(rgb / 255.0)


def parent_path(levels: int, *, strict: bool = False) -> str:
    """Relative path that walks *levels* up the hierarchy.

    0 -> ".", 1 -> "..", 3 -> "../../..". Negative input gives "" unless
    *strict* is set.
    """
    if strict and levels < 0:
        log.debug("Rejected parent path depth %d", levels)
        raise ValueError(f"numberLevelsUp must be >= 0, got {levels}")
    if levels == 0:
        return "."
    return ("../" * levels)[:-1]


def child_name(prefix: str, index: int) -> str:
    """Name for the index-th (1-based) repeated child, e.g. Wheel3."""
    return f"{prefix}{index}"


def render_material_effects(levels: int, *, strict: bool = False) -> dict[str, Any]:
    """RenderMaterialEffects pointing at the customisation provider *levels* up."""
    return {
        "InstanceData": {
            "MaterialCustomisationProviderEntity": parent_path(levels, strict=strict),
        }
    }
