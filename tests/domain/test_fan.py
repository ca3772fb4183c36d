import unittest

from src.keyanalytics.domain.utils import (
    calculate_fan_in,
    calculate_fan_in_and_fan_out,
)


class TestFanInFanOut(unittest.TestCase):
    def test_scalar(self):
        self.assertEqual(calculate_fan_in_and_fan_out(()), (1, 1))

    def test_vector(self):
        self.assertEqual(calculate_fan_in_and_fan_out((7,)), (7, 7))

    def test_linear_weight_is_out_by_in(self):
        self.assertEqual(calculate_fan_in_and_fan_out((10, 3)), (3, 10))
        self.assertEqual(calculate_fan_in((10, 3)), 3)

    def test_conv_weight_includes_receptive_field(self):
        # (out_ch, in_ch, kh, kw)
        self.assertEqual(calculate_fan_in_and_fan_out((8, 4, 3, 3)), (36, 72))

    def test_negative_dims_rejected(self):
        with self.assertRaises(ValueError):
            calculate_fan_in_and_fan_out((2, -1))


if __name__ == "__main__":
    unittest.main()
