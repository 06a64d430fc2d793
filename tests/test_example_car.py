"""Tests for the composed example car, its config and the CLI.

The example nests every builder the way a real car does, so relative paths
can be resolved against the actual tree instead of checked as strings.
"""

import json
import logging
import sys

import pytest

from train_prefabs.__main__ import _build_parser, config_from_args, main
from train_prefabs.config import BogieConfig, CarConfig, Config
from train_prefabs.example import example_train_car


def _resolve(root, path, relative):
    """Follow *relative* ("..", "../..", "./Child") from the node at *path*."""
    names = list(path)
    for part in relative.split("/"):
        if part == "..":
            names.pop()
        elif part != ".":
            names.append(part)
    node = root
    for name in names:
        node = node["Children"][name]
    return node


# ---------------------------------------------------------------------------
# Example tree
# ---------------------------------------------------------------------------


@pytest.fixture(scope="module")
def car():
    return example_train_car()


class TestExampleCar:
    def test_root(self, car):
        assert car["Prefab"] == "CoasterCarBase"
        tags = car["Components"]["SemanticTag"]["SemanticTagMap"]
        assert len(tags) == 3

    def test_wheels_reach_the_car(self, car):
        wheels = ["FrontBogie", "Wheels"]
        assembly = _resolve(car, wheels, ".")
        provider = assembly["Components"]["RenderMaterialEffects"]["InstanceData"][
            "MaterialCustomisationProviderEntity"
        ]
        assert _resolve(car, wheels, provider) is car

        for name, wheel in assembly["Children"].items():
            provider = wheel["Components"]["RenderMaterialEffects"]["InstanceData"][
                "MaterialCustomisationProviderEntity"
            ]
            assert _resolve(car, wheels + [name], provider) is car, name

    def test_wheel_properties_merged(self, car):
        wheels = car["Children"]["FrontBogie"]["Children"]["Wheels"]["Children"]
        assert sorted(wheels) == ["Wheel1", "Wheel2", "Wheel3", "Wheel4"]
        for wheel in wheels.values():
            assert wheel["Prefab"] == "CC_Mod_Wheel_Base"
            assert "WheelRadius" not in wheel["Properties"]

    def test_bogie_is_bone_attached(self, car):
        comps = car["Children"]["FrontBogie"]["Components"]
        assert comps["BoneTransform"]["BoneName"] == "FrontBogie"
        assert comps["TrackedRideWheel"] == {}
        assert comps["Transform"]["Scale"] == 1.0

    def test_symmetry_axis_resolves(self, car):
        platform = car["Children"]["SceneryPlatform"]
        ref = platform["Components"]["SceneryDuplicationContext"][
            "RotationalSymmetryAxisEntity"
        ]
        axis = _resolve(car, ["SceneryPlatform"], ref)
        assert axis["Components"]["Transform"]["Position"] == (0.0, 0.5, 0.0)

    def test_other_children(self, car):
        assert car["Children"]["CatchCar"]["Prefab"] == "AttachPoint"
        assert car["Children"]["Camera"]["Properties"]["FOV"]["Default"] == 1.0

    def test_json_serialisable(self, car):
        assert json.loads(json.dumps(car))["Prefab"] == "CoasterCarBase"

    def test_radius_flows_through(self):
        car = example_train_car(Config(bogie=BogieConfig(wheel_count=2, wheel_radius=0.3)))
        wheels = car["Children"]["FrontBogie"]["Children"]["Wheels"]["Children"]
        assert [w["Properties"]["WheelRadius"]["Default"] for w in wheels.values()] == [0.3, 0.3]

    def test_strict_config_rejects(self):
        with pytest.raises(ValueError):
            example_train_car(Config(bogie=BogieConfig(wheel_count=0), strict=True))

    def test_smoketest_config_builds(self):
        car = example_train_car(Config.for_smoketest())
        assert len(car["Components"]["SemanticTag"]["SemanticTagMap"]) == 1


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfig:
    def test_flat_dict(self):
        flat = Config().to_flat_dict()
        assert flat["car/mass"] == 1000.0
        assert flat["bogie/wheel_count"] == 4
        assert flat["strict"] is False

    def test_loader_is_fresh(self):
        cfg = Config(car=CarConfig(packages=("A", "B")))
        loader = cfg.asset_package_loader()
        assert loader == {"Packages": ["A", "B"]}
        loader["Packages"].append("C")
        assert cfg.asset_package_loader() == {"Packages": ["A", "B"]}


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


@pytest.fixture
def restore_logging(monkeypatch):
    """main() sets the root level and excepthook; put them back afterwards."""
    root = logging.getLogger()
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    level = root.level
    handlers = list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers[:] = handlers


class TestCLI:
    def test_overrides(self):
        args = _build_parser().parse_args(
            ["json", "--model", "Foo", "--channels", "2", "--wheels", "6", "--radius", "0.4"]
        )
        cfg = config_from_args(args)
        assert cfg.car.model_name == "Foo"
        assert cfg.car.packages == ("Foo",)
        assert cfg.car.flexi_channels == 2
        assert cfg.bogie.wheel_count == 6
        assert cfg.bogie.wheel_radius == 0.4
        assert cfg.strict is False

    def test_camera_vectors(self):
        args = _build_parser().parse_args(
            ["describe", "--camera-position", "1", "2", "3", "--camera-rotation", "0", "0.5", "0"]
        )
        cfg = config_from_args(args)
        assert cfg.car.camera_position == (1.0, 2.0, 3.0)
        assert isinstance(cfg.car.camera_position, tuple)
        assert cfg.car.camera_rotation == (0.0, 0.5, 0.0)

        camera = example_train_car(cfg)["Children"]["Camera"]["Properties"]
        assert camera["Position"]["Default"] == (1.0, 2.0, 3.0)
        assert camera["Rotation"]["Default"] == (0.0, 0.5, 0.0)

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "describe" in capsys.readouterr().out

    def test_json(self, capsys, restore_logging):
        assert main(["json", "--channels", "2"]) == 0
        tree = json.loads(capsys.readouterr().out)
        assert len(tree["Components"]["SemanticTag"]["SemanticTagMap"]) == 2

    def test_describe_logs_tree(self, caplog, restore_logging):
        with caplog.at_level(logging.INFO, logger="train_prefabs.debug"):
            assert main(["describe"]) == 0
        lines = [r.getMessage() for r in caplog.records if r.name == "train_prefabs.debug"]
        assert "Prefab: CoasterCarBase" in lines
        assert "        BoneName: FrontBogie" in lines

    def test_strict_error_exit_code(self, capsys, restore_logging):
        assert main(["json", "--strict", "--wheels", "0"]) == 2
        assert "wheel_count" in capsys.readouterr().err

    def test_excepthook_installed_once(self, capsys, restore_logging):
        assert main(["json"]) == 0
        hook = sys.excepthook
        assert hook.__name__ == "_logging_excepthook"
        assert main(["json"]) == 0
        assert sys.excepthook is hook
