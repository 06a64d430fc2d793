"""Prefab builders for train cars.

Each builder is a pure function: simple parameters -> a fresh nested dict
(Prefab Node) ready to drop into a larger authored tree for the host engine.

Usage:
    from train_prefabs import train_car_components, wheel_assembly

    car = {
        "Prefab": BASE_CAR_PREFAB,
        "Components": train_car_components("MyCar", loader, 3, 1000.0),
        "Children": {"FrontBogie": ...},
    }
"""

from train_prefabs.attachments import (
    bone_attachment_with_children,
    simple_attach_point,
    simple_bone_attachment,
)
from train_prefabs.camera import simple_camera_child
from train_prefabs.cars import train_car_components
from train_prefabs.debug import print_prefab
from train_prefabs.primitives import (
    BASE_CAR_PREFAB,
    BASE_WHEEL_ASSEMBLY_PREFAB,
    BOGIE_CAR_PLATFORM,
    FRONT_CAR_PLATFORM,
    MID_CAR_PLATFORM,
    REAR_CAR_PLATFORM,
    child_name,
    hex_color_to_normalized_color,
    parent_path,
    render_material_effects,
    transform,
)
from train_prefabs.scenery import (
    rotational_symmetry_scenery_platform,
    simple_scenery_platform,
)
from train_prefabs.wheels import bogie_components, wheel_assembly, wheel_child

__all__ = [
    "BASE_CAR_PREFAB",
    "BASE_WHEEL_ASSEMBLY_PREFAB",
    "BOGIE_CAR_PLATFORM",
    "FRONT_CAR_PLATFORM",
    "MID_CAR_PLATFORM",
    "REAR_CAR_PLATFORM",
    "bogie_components",
    "bone_attachment_with_children",
    "child_name",
    "hex_color_to_normalized_color",
    "parent_path",
    "print_prefab",
    "render_material_effects",
    "rotational_symmetry_scenery_platform",
    "simple_attach_point",
    "simple_bone_attachment",
    "simple_camera_child",
    "simple_scenery_platform",
    "train_car_components",
    "transform",
    "wheel_assembly",
    "wheel_child",
]
