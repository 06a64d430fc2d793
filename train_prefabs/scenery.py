"""Scenery platforms riding on a train car.

A platform lets players build scenery onto a car. Twinning groups keep the
same platform in sync between cars and between trains:

    Train{0}_AllCars       every car of one train
    AllTrains_<suffix>     this platform on every train
    AllTrains_AllCars      everything

{0} is left for the host to fill with the train index.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from train_prefabs.primitives import PrefabNode, parent_path, zero_transform

DISPLAY_PLANE_OFFSET = -0.2
PLATFORM_ID_PROVIDER_DEPTH = 4
SYMMETRY_AXIS_CHILD = "RotationalSymmetryAxis"


def simple_scenery_platform(mesh_name: str, name_suffix: str) -> PrefabNode:
    """Scenery platform child without a rotational symmetry axis.

    Args:
        mesh_name: Platform mesh inside the car's asset package
        name_suffix: Appended to the platform name and its twinning group
    """
    return {
        "Components": {
            "SceneryPlatformFinder": {
                "ModelAssetPackageLoader": "..",
                "ModelName": mesh_name,
                "DisplayShapeLocalPlaneDistance": DISPLAY_PLANE_OFFSET,
            },
            "SceneryPlatformDynamic": {
                "InputValues": {"__property": "InputValues"},
                "TwinningSetGroupFormats": [
                    {"GroupNameFormat": "Train{0}_AllCars"},
                    {"SetIndex": 1, "GroupNameFormat": f"AllTrains_{name_suffix}"},
                    {"SetIndex": 2, "GroupNameFormat": "AllTrains_AllCars"},
                ],
                "PlatformNameFormat": f"Train{{0}}_{name_suffix}",
            },
            "TriggerTargetContext": {"TrackedRideCarEntity": ".."},
            "Transform": zero_transform(),
            "AssetPackageProvider": {"LoaderPath": ".."},
            "SceneryPlatform": {
                "PlatformIDProvider": parent_path(PLATFORM_ID_PROVIDER_DEPTH),
            },
        },
        "Properties": {
            # Append: values set here extend the inherited list instead of replacing it
            "InputValues": {
                "Type": "array",
                "Contents": {"Type": "uint64"},
                "Default": {"__inheritance": "Append"},
            }
        },
    }


def rotational_symmetry_scenery_platform(
    mesh_name: str, name_suffix: str, symmetry_axis_transform: Mapping[str, Any]
) -> PrefabNode:
    """Scenery platform duplicated around a rotational symmetry axis.

    The axis is a child entity placed by *symmetry_axis_transform*; its Y (up)
    axis is the one used.
    """
    platform = simple_scenery_platform(mesh_name, name_suffix)

    platform["Components"]["SceneryDuplicationContext"] = {
        "RotationalSymmetryAxisEntity": f"./{SYMMETRY_AXIS_CHILD}",
    }
    platform["Children"] = {
        SYMMETRY_AXIS_CHILD: {
            "Components": {"Transform": copy.deepcopy(symmetry_axis_transform)},
        }
    }
    return platform
