#!/usr/bin/env python3
"""Test suite for attitude constants"""

import unittest
import numpy as np
from pyattitude.core.constants import (
    ATTITUDE_DTYPE, GIMBAL_LOCK_THRESHOLD, HALF_PI, TWO_PI,
    IDENTITY_DCM, IDENTITY_QUATERNION
)


class TestNumericalPolicy(unittest.TestCase):
    """Test numerical policy constants"""

    def test_storage_precision(self):
        """Converted values are stored as single precision"""
        self.assertIs(ATTITUDE_DTYPE, np.float32)

    def test_gimbal_lock_threshold(self):
        """Threshold is 1e-3 rad (~0.057 deg)"""
        self.assertEqual(GIMBAL_LOCK_THRESHOLD, 1.0e-3)
        self.assertAlmostEqual(np.degrees(GIMBAL_LOCK_THRESHOLD), 0.0573, delta=1e-4)

    def test_half_pi_at_storage_precision(self):
        """HALF_PI is π/2 rounded to float32"""
        self.assertEqual(HALF_PI, float(np.float32(np.pi / 2)))
        self.assertAlmostEqual(HALF_PI, np.pi / 2, delta=1e-7)

    def test_two_pi(self):
        """TWO_PI is a full turn"""
        self.assertEqual(TWO_PI, 2 * np.pi)


class TestIdentity(unittest.TestCase):
    """Test null rotation constants"""

    def test_identity_quaternion(self):
        """Null rotation is [1, 0, 0, 0]"""
        np.testing.assert_array_equal(IDENTITY_QUATERNION, [1.0, 0.0, 0.0, 0.0])
        self.assertEqual(IDENTITY_QUATERNION.dtype, np.float32)

    def test_identity_dcm(self):
        """Null rotation matrix is the identity"""
        np.testing.assert_array_equal(IDENTITY_DCM, np.eye(3))
        self.assertEqual(IDENTITY_DCM.dtype, np.float32)

    def test_read_only(self):
        """Shared identity arrays cannot be modified"""
        with self.assertRaises(ValueError):
            IDENTITY_QUATERNION[0] = 0.0
        with self.assertRaises(ValueError):
            IDENTITY_DCM[0, 0] = 0.0


if __name__ == '__main__':
    unittest.main()
