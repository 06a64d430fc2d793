"""Train car component sets."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from train_prefabs.primitives import child_name

log = logging.getLogger(__name__)

# Channel counts above this have never been checked in game
MAX_VERIFIED_CHANNELS = 4


def semantic_tag_map(channel_count: int) -> list[dict[str, Any]]:
    """CoasterCar1..N semantic tags, one per flexi colour channel.

    The first channel maps to the base material; channel i > 1 takes
    customisation slot i - 1.
    """
    semantics = []
    for i in range(1, channel_count + 1):
        semantic: dict[str, Any] = {"SemanticTag": child_name("CoasterCar", i)}
        if i != 1:
            semantic["MaterialCustomisationProviderSlot"] = i - 1
        semantics.append(semantic)
    return semantics


def train_car_components(
    model_name: str,
    asset_package_loader: Mapping[str, Any],
    channel_count: int,
    mass: float,
    *,
    strict: bool = False,
) -> dict[str, Any]:
    """Components for a train car prefab.

    Args:
        model_name: Car model; also used as its skeleton
        asset_package_loader: AssetPackageLoader data, same layout as in any
            other prefab (deep-copied)
        channel_count: Number of flexi colour channels
        mass: Car mass in kilograms, used by physics. Usually around 1000.0
        strict: Raise ValueError for a non-positive channel_count
    """
    if strict and channel_count <= 0:
        log.debug("Rejected channel count %d for %s", channel_count, model_name)
        raise ValueError(f"channel_count must be positive, got {channel_count}")
    if channel_count > MAX_VERIFIED_CHANNELS:
        log.warning(
            "%s: %d flexi channels requested, behaviour above %d is unverified",
            model_name,
            channel_count,
            MAX_VERIFIED_CHANNELS,
        )

    return {
        "Model": {
            "UpdateCullingVolume": False,
            "ModelName": model_name,
        },
        "ModelSkeleton": {"ModelName": model_name},
        "TrackedRideCar": {"Mass": mass},
        "AssetPackageProvider": {"LoaderPath": "."},
        "AssetPackageLoader": copy.deepcopy(asset_package_loader),
        "SemanticTag": {"SemanticTagMap": semantic_tag_map(channel_count)},
        "Transform": {},
    }
