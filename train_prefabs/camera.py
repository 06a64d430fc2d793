"""Camera children."""

from __future__ import annotations

import copy
from typing import Any

from train_prefabs.primitives import PrefabNode

DEFAULT_FOV = 1.0


def simple_camera_child(prefab_name: str, position: Any, rotation: Any) -> PrefabNode:
    """Camera prefab placed through its exposed properties.

    *position* and *rotation* (radians) are relative to the parent's origin
    and are copied into the result.
    """
    return {
        "Prefab": prefab_name,
        "Properties": {
            "FOV": {"Default": DEFAULT_FOV},
            "Position": {"Default": copy.deepcopy(position)},
            "Rotation": {"Default": copy.deepcopy(rotation)},
        },
    }
