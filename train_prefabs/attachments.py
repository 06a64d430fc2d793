"""Bone attachments and attach points."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from train_prefabs.primitives import ATTACH_POINT_PREFAB, PrefabNode, zero_transform


def simple_bone_attachment(bone_name: str) -> PrefabNode:
    """Node following *bone_name* on the animated parent, with a zeroed transform."""
    return {
        "Components": {
            "BoneTransform": {
                "AnimEntity": "..",
                "BoneName": bone_name,
            },
            "Transform": zero_transform(),
        }
    }


def bone_attachment_with_children(
    bone_name: str, children: Mapping[str, Any]
) -> PrefabNode:
    """Bone attachment carrying *children*.

    The mapping is attached as-is, not copied, so later edits to it show up
    in the returned node.
    """
    node = simple_bone_attachment(bone_name)
    node["Children"] = children
    return node


def simple_attach_point(bone_name: str) -> PrefabNode:
    """AttachPoint child for things hooked on from outside the car (catch cars)."""
    return {
        "Components": {"Transform": {}},
        "Prefab": ATTACH_POINT_PREFAB,
        "Properties": {
            "AttachBone": {"Default": bone_name},
        },
    }
