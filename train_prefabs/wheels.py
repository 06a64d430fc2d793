"""Wheel assemblies, wheels and bogies.

Hierarchy these depths assume (each arrow is one level):

    car (customisation provider) -> bogie -> wheel assembly -> wheel

so the assembly reaches the provider two levels up and each wheel three.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from train_prefabs.primitives import (
    WHEEL_BASE_PREFAB,
    PrefabNode,
    child_name,
    render_material_effects,
)

log = logging.getLogger(__name__)

ASSEMBLY_PROVIDER_DEPTH = 2
WHEEL_PROVIDER_DEPTH = 3


def wheel_assembly(
    prefab_name: str, wheel_count: int, *, strict: bool = False
) -> PrefabNode:
    """Wheel assembly prefab whose wheels take their colours from the car.

    Args:
        prefab_name: Wheel assembly prefab to spawn
        wheel_count: Number of wheels on that prefab (Wheel1..WheelN)
        strict: Raise ValueError for a non-positive wheel_count instead of
            producing an assembly with no wheels
    """
    if strict and wheel_count <= 0:
        log.debug("Rejected wheel count %d for %s", wheel_count, prefab_name)
        raise ValueError(f"wheel_count must be positive, got {wheel_count}")

    children = {}
    for i in range(1, wheel_count + 1):
        children[child_name("Wheel", i)] = {
            "Components": {
                "RenderMaterialEffects": render_material_effects(WHEEL_PROVIDER_DEPTH),
            }
        }

    return {
        "Components": {
            "RenderMaterialEffects": render_material_effects(ASSEMBLY_PROVIDER_DEPTH),
            "Transform": {},
        },
        "Children": children,
        "Prefab": prefab_name,
    }


def wheel_child(
    bone_name: str, model_name: str, wheel_radius: float | None = None
) -> PrefabNode:
    """Single wheel attached to *bone_name* on the enclosing assembly.

    When *wheel_radius* is None the WheelRadius property is left out
    entirely so the base prefab's own default applies.
    """
    properties: dict[str, Any] = {
        "WheelBoneName": {"Default": bone_name},
        "ModelName": {"Default": model_name},
    }
    if wheel_radius is not None:
        properties["WheelRadius"] = {"Default": wheel_radius}

    return {
        "Properties": properties,
        "Prefab": WHEEL_BASE_PREFAB,
    }


def bogie_components(asset_package_loader: Mapping[str, Any]) -> dict[str, Any]:
    """Component set for a bogie (wheel assembly carrier) entity.

    *asset_package_loader* uses the same layout as any other prefab's
    AssetPackageLoader and is deep-copied into the result.
    """
    return {
        "Transform": {},
        "TrackedRideWheel": {},
        "AssetPackageLoader": copy.deepcopy(asset_package_loader),
        "AssetPackageProvider": {"LoaderPath": "."},
    }
