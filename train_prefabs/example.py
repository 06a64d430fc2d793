"""A complete car prefab built from every builder in the package.

Layout of the generated tree:

    car                                  customisation + asset provider
    ├── FrontBogie   (bone attachment)   bogie components
    │   └── Wheels   (wheel assembly)    RenderMaterialEffects -> ../..
    │       ├── Wheel1                   RenderMaterialEffects -> ../../..
    │       └── ...
    ├── SceneryPlatform                  rotational symmetry
    │   └── RotationalSymmetryAxis
    ├── CatchCar     (attach point)
    └── Camera

The wheel models themselves are children of the assembly prefab and are
declared under Properties of each WheelN entry.
"""

from __future__ import annotations

import logging

from train_prefabs.attachments import bone_attachment_with_children, simple_attach_point
from train_prefabs.camera import simple_camera_child
from train_prefabs.cars import train_car_components
from train_prefabs.config import Config
from train_prefabs.primitives import (
    BASE_CAR_PREFAB,
    FRONT_CAR_PLATFORM,
    ZERO,
    PrefabNode,
    child_name,
    transform,
)
from train_prefabs.scenery import rotational_symmetry_scenery_platform
from train_prefabs.wheels import bogie_components, wheel_assembly, wheel_child

log = logging.getLogger(__name__)


def _bogie(cfg: Config) -> PrefabNode:
    b = cfg.bogie
    assembly = wheel_assembly(b.wheel_assembly_prefab, b.wheel_count, strict=cfg.strict)
    for i in range(1, b.wheel_count + 1):
        name = child_name("Wheel", i)
        wheel = wheel_child(name, b.wheel_model, b.wheel_radius)
        assembly["Children"][name].update(
            {"Prefab": wheel["Prefab"], "Properties": wheel["Properties"]}
        )

    bogie = bone_attachment_with_children(b.bogie_bone, {"Wheels": assembly})
    # The bone attachment's zeroed Transform wins over the bogie's empty one
    bogie["Components"] = {
        **bogie_components(cfg.asset_package_loader()),
        **bogie["Components"],
    }
    return bogie


def example_train_car(cfg: Config | None = None) -> PrefabNode:
    """Build the full example car tree described by *cfg*."""
    cfg = cfg or Config()
    c = cfg.car
    log.debug("Building example car: %s", cfg.to_flat_dict())

    axis = transform((0.0, c.platform_axis_height, 0.0), ZERO, 1.0)

    return {
        "Prefab": BASE_CAR_PREFAB,
        "Components": train_car_components(
            c.model_name,
            cfg.asset_package_loader(),
            c.flexi_channels,
            c.mass,
            strict=cfg.strict,
        ),
        "Children": {
            cfg.bogie.bogie_bone: _bogie(cfg),
            "SceneryPlatform": rotational_symmetry_scenery_platform(
                c.platform_mesh, FRONT_CAR_PLATFORM, axis
            ),
            "CatchCar": simple_attach_point(c.catch_bone),
            "Camera": simple_camera_child(
                c.camera_prefab, c.camera_position, c.camera_rotation
            ),
        },
    }
