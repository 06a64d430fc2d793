"""
Configuration for the example train car assembly.

All parameters the CLI exposes live here, grouped by the entity they shape.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

from train_prefabs.primitives import BASE_WHEEL_ASSEMBLY_PREFAB, Vec3


@dataclass
class CarConfig:
    """Train car configuration."""

    model_name: str = "ExampleCoasterCar"
    packages: tuple[str, ...] = ("ExampleCoasterCar",)
    flexi_channels: int = 3  # Above 4 is unverified in game
    mass: float = 1000.0  # kg

    # Scenery platform
    platform_mesh: str = "ExampleCoasterCar_Platform"
    platform_axis_height: float = 0.5

    # Catch car hook
    catch_bone: str = "CatchCarAttach"

    # Onboard camera
    camera_prefab: str = "CoasterCarCamera"
    camera_position: Vec3 = (0.0, 1.2, 0.3)
    camera_rotation: Vec3 = (0.0, 0.0, 0.0)  # radians


@dataclass
class BogieConfig:
    """Bogie and wheel configuration."""

    bogie_bone: str = "FrontBogie"
    wheel_assembly_prefab: str = BASE_WHEEL_ASSEMBLY_PREFAB
    wheel_count: int = 4
    wheel_model: str = "ExampleCoasterWheel"
    wheel_radius: float | None = None  # None = keep the wheel prefab's default


@dataclass
class Config:
    """Complete example car configuration."""

    car: CarConfig = field(default_factory=CarConfig)
    bogie: BogieConfig = field(default_factory=BogieConfig)
    strict: bool = False  # Reject bad counts/paths instead of passing them through

    def to_flat_dict(self) -> dict:
        """
        Convert to a flat dict for logging.

        Prefixes each section's keys with section name.
        Example: car.mass -> "car/mass"
        """
        result = {}
        for section_name, section in [("car", self.car), ("bogie", self.bogie)]:
            for key, value in asdict(section).items():
                result[f"{section_name}/{key}"] = value
        result["strict"] = self.strict
        return result

    def asset_package_loader(self) -> dict:
        """AssetPackageLoader data for the car's packages."""
        return {"Packages": list(self.car.packages)}

    @classmethod
    def for_smoketest(cls) -> Config:
        """Smallest config that still touches every builder."""
        return cls(
            car=CarConfig(flexi_channels=1),
            bogie=BogieConfig(wheel_count=1, wheel_radius=0.2),
            strict=True,
        )
