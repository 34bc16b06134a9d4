import unittest
from pathlib import Path
import sys


# Allow `import theremin.*` from repo root.
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))


class TestAxisConfigValidation(unittest.TestCase):
    def test_defaults_are_valid(self) -> None:
        from theremin.config import AxisConfig

        AxisConfig().validate("x")

    def test_fmin_above_fmax_is_reported_on_fmin(self) -> None:
        from theremin.config import AxisConfig
        from theremin.errors import InvalidValue

        with self.assertRaises(InvalidValue) as ctx:
            AxisConfig(fmin=400, fmax=300).validate("x")
        self.assertEqual((ctx.exception.axis, ctx.exception.field), ("x", "fmin"))
        self.assertEqual(ctx.exception.value, 400)
        self.assertIn("x.fmin", str(ctx.exception))

    def test_fmin_equal_to_fmax_is_allowed(self) -> None:
        from theremin.config import AxisConfig

        AxisConfig(fmin=300, fmax=300).validate("y")

    def test_negative_fmin_rejected(self) -> None:
        from theremin.config import AxisConfig
        from theremin.errors import InvalidValue

        with self.assertRaises(InvalidValue) as ctx:
            AxisConfig(fmin=-1).validate("y")
        self.assertEqual(ctx.exception.field, "fmin")

    def test_sensitivity_must_be_positive(self) -> None:
        from theremin.config import AxisConfig
        from theremin.errors import InvalidValue

        for bad in (0, -0.5):
            with self.assertRaises(InvalidValue) as ctx:
                AxisConfig(sensitivity=bad).validate("z")
            self.assertEqual((ctx.exception.axis, ctx.exception.field), ("z", "sensitivity"))

    def test_unknown_effect_and_shape_rejected(self) -> None:
        from theremin.config import AxisConfig
        from theremin.errors import InvalidValue

        with self.assertRaises(InvalidValue) as ctx:
            AxisConfig(effect="reverb").validate("x")
        self.assertEqual(ctx.exception.field, "effect")

        with self.assertRaises(InvalidValue) as ctx:
            AxisConfig(wave_shape="cubic").validate("x")
        self.assertEqual(ctx.exception.field, "wave_shape")

    def test_non_numbers_rejected(self) -> None:
        from theremin.config import AxisConfig
        from theremin.errors import InvalidValue

        for bad in ("20", True, None, float("nan"), float("inf")):
            with self.assertRaises(InvalidValue):
                AxisConfig(fmax=bad).validate("x")

    def test_integer_too_large_for_float_rejected(self) -> None:
        from theremin.config import AxisConfig
        from theremin.errors import InvalidValue

        with self.assertRaises(InvalidValue) as ctx:
            AxisConfig(fmax=10 ** 400).validate("y")
        self.assertEqual((ctx.exception.axis, ctx.exception.field), ("y", "fmax"))
        self.assertEqual(ctx.exception.reason, "must be finite")


class TestConfigValidation(unittest.TestCase):
    def test_default_config_matches_sample_document(self) -> None:
        from theremin.config import AXES, AxisConfig, default_config

        cfg = default_config()
        cfg.validate()
        self.assertEqual(cfg.device_type, "touchscreen")
        self.assertEqual(sorted(cfg.axes), sorted(AXES))
        self.assertEqual(cfg.axis("x"), AxisConfig(fmin=20, fmax=300, sensitivity=1, effect="none", wave_shape="sin"))

    def test_default_config_axes_are_independent(self) -> None:
        from theremin.config import default_config

        cfg = default_config()
        cfg.axes["x"].fmax = 1000
        self.assertEqual(cfg.axes["y"].fmax, 300)

    def test_empty_device_type_rejected(self) -> None:
        from theremin.config import default_config
        from theremin.errors import InvalidValue

        cfg = default_config(device_type="")
        with self.assertRaises(InvalidValue) as ctx:
            cfg.validate()
        self.assertIsNone(ctx.exception.axis)
        self.assertEqual(ctx.exception.field, "type")

    def test_missing_axis_reported(self) -> None:
        from theremin.config import default_config
        from theremin.errors import MissingField

        cfg = default_config()
        del cfg.axes["z"]
        with self.assertRaises(MissingField) as ctx:
            cfg.validate()
        self.assertEqual(ctx.exception.name, "z")

    def test_extra_axis_rejected(self) -> None:
        from theremin.config import AxisConfig, default_config
        from theremin.errors import InvalidValue

        cfg = default_config()
        cfg.axes["w"] = AxisConfig()
        with self.assertRaises(InvalidValue) as ctx:
            cfg.validate()
        self.assertEqual(ctx.exception.axis, "w")

    def test_axis_lookup(self) -> None:
        from theremin.config import default_config

        cfg = default_config()
        self.assertIs(cfg.axis("y"), cfg.axes["y"])
        with self.assertRaises(KeyError):
            cfg.axis("q")


if __name__ == "__main__":
    unittest.main()
