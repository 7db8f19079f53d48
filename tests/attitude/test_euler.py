#!/usr/bin/env python3
"""Test suite for euler angle conversions"""

import unittest
import numpy as np
from pyattitude.attitude import euler2dcm, euler2quat, dcm2euler, rot_x, rot_y, rot_z


def _random_euler(rng, n, pitch_margin=0.1):
    """Euler angles away from gimbal lock and from the ±π wrap of roll/yaw"""
    roll = rng.uniform(-3.0, 3.0, n)
    pitch = rng.uniform(-np.pi/2 + pitch_margin, np.pi/2 - pitch_margin, n)
    yaw = rng.uniform(-3.0, 3.0, n)
    return np.column_stack([roll, pitch, yaw]).astype(np.float32)


class TestEulerToQuaternion(unittest.TestCase):
    """Test euler2quat"""

    def test_zero_angles_give_identity(self):
        """Zero roll, pitch and yaw is the null rotation"""
        q = euler2quat(np.zeros(3, dtype=np.float32))
        np.testing.assert_array_equal(q, [1.0, 0.0, 0.0, 0.0])

    def test_output_is_float32(self):
        """Result is narrowed to float32 even for float64 input"""
        q = euler2quat(np.array([0.1, 0.2, 0.3]))
        self.assertEqual(q.dtype, np.float32)
        self.assertEqual(q.shape, (4,))

    def test_roll_90_degrees(self):
        """90° roll is a half-angle rotation about x"""
        q = euler2quat(np.array([np.pi/2, 0.0, 0.0], dtype=np.float32))
        np.testing.assert_allclose(q, [0.70711, 0.70711, 0.0, 0.0], atol=1e-5)

    def test_pitch_and_yaw_axes(self):
        """Single-axis pitch and yaw map onto y and z components"""
        q = euler2quat(np.array([0.0, 0.5, 0.0]))
        np.testing.assert_allclose(q, [np.cos(0.25), 0.0, np.sin(0.25), 0.0], atol=1e-7)

        q = euler2quat(np.array([0.0, 0.0, -1.2]))
        np.testing.assert_allclose(q, [np.cos(-0.6), 0.0, 0.0, np.sin(-0.6)], atol=1e-7)

    def test_unit_norm_for_all_inputs(self):
        """Output is unit norm, including out-of-range angles"""
        rng = np.random.default_rng(7)
        angles = rng.uniform(-10.0, 10.0, (200, 3))
        for e in angles:
            q = euler2quat(e).astype(np.double)
            self.assertAlmostEqual(np.dot(q, q), 1.0, delta=1e-6)

    def test_consistent_with_matrix(self):
        """euler2quat and euler2dcm describe the same rotation"""
        rng = np.random.default_rng(11)
        for e in _random_euler(rng, 50):
            q = euler2quat(e).astype(np.double)
            w, x, y, z = q
            C_from_q = np.array([
                [w*w + x*x - y*y - z*z, 2*(x*y - w*z), 2*(w*y + x*z)],
                [2*(x*y + w*z), w*w - x*x + y*y - z*z, 2*(y*z - w*x)],
                [2*(x*z - w*y), 2*(w*x + y*z), w*w - x*x - y*y + z*z]])
            np.testing.assert_allclose(euler2dcm(e), C_from_q, atol=1e-5)


class TestEulerToMatrix(unittest.TestCase):
    """Test euler2dcm"""

    def test_zero_angles_give_identity(self):
        """Zero angles give the identity matrix"""
        C = euler2dcm(np.zeros(3))
        np.testing.assert_array_equal(C, np.eye(3))
        self.assertEqual(C.dtype, np.float32)

    def test_matches_zyx_composition(self):
        """Direct expansion equals Rz(yaw) Ry(pitch) Rx(roll)"""
        rng = np.random.default_rng(3)
        angles = rng.uniform(-np.pi, np.pi, (50, 3))
        for roll, pitch, yaw in angles:
            expected = rot_z(yaw) @ rot_y(pitch) @ rot_x(roll)
            C = euler2dcm(np.array([roll, pitch, yaw]))
            np.testing.assert_allclose(C, expected, atol=1e-6)

    def test_orthonormal(self):
        """Output is a proper rotation"""
        rng = np.random.default_rng(5)
        for e in rng.uniform(-np.pi, np.pi, (50, 3)):
            C = euler2dcm(e).astype(np.double)
            np.testing.assert_allclose(C @ C.T, np.eye(3), atol=1e-6)
            self.assertAlmostEqual(np.linalg.det(C), 1.0, delta=1e-6)

    def test_round_trip_away_from_gimbal_lock(self):
        """dcm2euler inverts euler2dcm for pitch inside (-π/2, π/2)"""
        rng = np.random.default_rng(42)
        for e in _random_euler(rng, 200):
            e_recovered = dcm2euler(euler2dcm(e))
            np.testing.assert_allclose(e_recovered, e, atol=1e-5,
                                       err_msg=f"Round-trip failed for {e}")


class TestElementalRotations(unittest.TestCase):
    """Test single-axis rotation matrices"""

    def test_rot_x(self):
        """Rotating y by 90° about x gives z"""
        np.testing.assert_allclose(rot_x(np.pi/2) @ [0.0, 1.0, 0.0], [0.0, 0.0, 1.0], atol=1e-12)

    def test_rot_y(self):
        """Rotating z by 90° about y gives x"""
        np.testing.assert_allclose(rot_y(np.pi/2) @ [0.0, 0.0, 1.0], [1.0, 0.0, 0.0], atol=1e-12)

    def test_rot_z(self):
        """Rotating x by 90° about z gives y"""
        np.testing.assert_allclose(rot_z(np.pi/2) @ [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], atol=1e-12)

    def test_inverse_is_transpose(self):
        """Negative angle gives the transposed matrix"""
        for rot in (rot_x, rot_y, rot_z):
            np.testing.assert_allclose(rot(-0.7), rot(0.7).T, atol=1e-15)


if __name__ == '__main__':
    unittest.main()
