import unittest

from src.keyanalytics.domain import ILayer
from src.keyanalytics.infrastructure.initializers import LayerShape


class TestLayerShape(unittest.TestCase):
    def test_dense_layer_fans(self):
        layer = LayerShape.dense(in_features=128, out_features=64)
        self.assertEqual(layer.weights_shape, (64, 128))
        self.assertEqual(layer.fan_in_and_fan_out(), (128, 64))
        self.assertIsInstance(layer, ILayer)

    def test_conv_layer_fans(self):
        layer = LayerShape((16, 3, 5, 5))
        self.assertEqual(layer.fan_in_and_fan_out(), (75, 400))

    def test_negative_shape_rejected(self):
        with self.assertRaises(ValueError):
            LayerShape((4, -2))


if __name__ == "__main__":
    unittest.main()
