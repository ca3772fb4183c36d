import unittest

from src.keyanalytics.domain import (
    ErrorId,
    Status,
    KeyAnalyticsError,
    DimensionMismatchError,
    NullEngineOrLayerError,
    MissingTargetTensorError,
)


class TestStatus(unittest.TestCase):
    def test_empty_status_is_ok(self):
        s = Status()
        self.assertTrue(s.ok)
        self.assertTrue(bool(s))
        self.assertEqual(len(s), 0)
        self.assertEqual(s.errors, ())
        self.assertEqual(s.description(), "OK")
        s.raise_for_status()  # no-op

    def test_add_and_membership(self):
        s = Status(ErrorId.NULL_RESULT, "nothing registered")
        self.assertFalse(s.ok)
        self.assertFalse(bool(s))
        self.assertIn(ErrorId.NULL_RESULT, s)
        self.assertNotIn(ErrorId.NULL_PARAMETER, s)
        self.assertIn("NullResult: nothing registered", s.description())

    def test_merge_preserves_order(self):
        a = Status(ErrorId.ALLOCATION_FAILURE)
        b = Status(ErrorId.DIMENSION_MISMATCH, "sums")
        a |= b
        self.assertEqual(
            a.errors, (ErrorId.ALLOCATION_FAILURE, ErrorId.DIMENSION_MISMATCH)
        )
        # the merged-in status is untouched
        self.assertEqual(b.errors, (ErrorId.DIMENSION_MISMATCH,))

    def test_raise_for_status_uses_first_error(self):
        s = Status(ErrorId.DIMENSION_MISMATCH, "bad").add(ErrorId.NULL_RESULT)
        with self.assertRaises(DimensionMismatchError) as cm:
            s.raise_for_status()
        self.assertIs(cm.exception.status, s)
        self.assertIsInstance(cm.exception, KeyAnalyticsError)
        self.assertIsInstance(cm.exception, ValueError)
        self.assertIn("NullResult", str(cm.exception))

    def test_every_error_id_maps_to_its_exception(self):
        for error in ErrorId:
            with self.subTest(error=error):
                with self.assertRaises(KeyAnalyticsError) as cm:
                    Status(error).raise_for_status()
                self.assertEqual(type(cm.exception).error_id, error)

    def test_initializer_errors(self):
        with self.assertRaises(NullEngineOrLayerError):
            Status(ErrorId.NULL_ENGINE_OR_LAYER).raise_for_status()
        with self.assertRaises(MissingTargetTensorError) as cm:
            Status(ErrorId.MISSING_TARGET_TENSOR, "no value").raise_for_status()
        self.assertEqual(str(cm.exception), "MissingTargetTensor: no value")


if __name__ == "__main__":
    unittest.main()
