import unittest

import numpy as np

import src.keyanalytics as ka


class TestPackageSurface(unittest.TestCase):
    def test_version(self):
        self.assertEqual(ka.__version__, "0.1.0")

    def test_public_names_resolve(self):
        for name in ka.__all__:
            with self.subTest(name=name):
                self.assertTrue(hasattr(ka, name))

    def test_end_to_end(self):
        result = ka.zscore(
            ka.HomogenNumericTable(np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])),
            ka.ZScoreParameter(result_to_compute=ka.ResultToCompute.MEAN),
        )
        np.testing.assert_allclose(result.means.to_numpy(), [[3.0, 4.0]])

        layer = ka.LayerShape.dense(3, 2)
        descriptor = ka.XavierInitializerTaskDescriptor.create(
            ka.InitializerResult(ka.HomogenTensor(layer.weights_shape)),
            ka.XavierParameter(engine=ka.MT19937Engine(), layer=layer),
        )
        self.assertEqual(descriptor.layer.fan_in_and_fan_out(), (3, 2))


if __name__ == "__main__":
    unittest.main()
