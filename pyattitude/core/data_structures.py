# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Core value types for attitude representations"""

import logging
from dataclasses import dataclass, field

import numpy as np

from ..attitude import (
    dcm2euler, dcm2quat, euler2dcm, euler2quat, is_gimbal_lock,
    quat2dcm, quat2euler,
)
from .constants import (
    ATTITUDE_DTYPE, DCM_SHAPE, EULER_SIZE, IDENTITY_DCM, IDENTITY_QUATERNION, QUAT_SIZE,
)

logger = logging.getLogger(__name__)


def _as_vector(values, size, name):
    v = np.asarray(values, dtype=ATTITUDE_DTYPE)
    if v.shape != (size,):
        raise ValueError(f"{name} requires {size} elements, got shape {v.shape}")
    return v


@dataclass(frozen=True)
class Quaternion:
    """Unit quaternion describing a 3-D rotation.

    Attributes
    ----------
    w : float
        Scalar part
    x, y, z : float
        Vector part

    Notes
    -----
    Components are stored as float32. Unit norm is the caller's
    responsibility and is never checked or enforced; ``q`` and ``-q``
    describe the same rotation.
    """
    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        for name in ('w', 'x', 'y', 'z'):
            object.__setattr__(self, name, ATTITUDE_DTYPE(getattr(self, name)))

    @classmethod
    def from_array(cls, q):
        """Create from a [w, x, y, z] array.

        Raises
        ------
        ValueError
            If the array does not hold exactly four elements
        """
        w, x, y, z = _as_vector(q, QUAT_SIZE, "Quaternion")
        return cls(w, x, y, z)

    @classmethod
    def identity(cls):
        """Null rotation [1, 0, 0, 0]."""
        return cls.from_array(IDENTITY_QUATERNION)

    @property
    def norm(self):
        """Euclidean norm of the four components."""
        return float(np.linalg.norm(self.as_array().astype(np.double)))

    def as_array(self):
        """Return the quaternion as a float32 [w, x, y, z] array."""
        return np.array([self.w, self.x, self.y, self.z], dtype=ATTITUDE_DTYPE)

    def to_dcm(self):
        """Convert to a rotation matrix."""
        return RotationMatrix(quat2dcm(self.as_array()))

    def to_euler(self):
        """Convert to roll-pitch-yaw euler angles."""
        return EulerAngles.from_array(quat2euler(self.as_array()))


@dataclass(frozen=True)
class EulerAngles:
    """Roll-pitch-yaw euler angles, intrinsic 'ZYX' sequence, in radians.

    Attributes
    ----------
    roll : float
        Rotation about the body x-axis, (-π, π]
    pitch : float
        Rotation about the intermediate y-axis, [-π/2, π/2]
    yaw : float
        Rotation about the z-axis, (-π, π]

    Notes
    -----
    The ranges above are what conversions produce. Any finite angles are
    accepted as input.
    """
    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0

    def __post_init__(self):
        for name in ('roll', 'pitch', 'yaw'):
            object.__setattr__(self, name, ATTITUDE_DTYPE(getattr(self, name)))

    @classmethod
    def from_array(cls, e):
        """Create from a [roll, pitch, yaw] array in radians."""
        roll, pitch, yaw = _as_vector(e, EULER_SIZE, "EulerAngles")
        return cls(roll, pitch, yaw)

    @classmethod
    def from_degrees(cls, roll, pitch, yaw):
        """Create from angles given in degrees."""
        return cls.from_array(np.radians(np.array([roll, pitch, yaw], dtype=np.double)))

    @property
    def is_gimbal_locked(self):
        """True if pitch is close enough to ±π/2 that roll and yaw are degenerate."""
        return bool(is_gimbal_lock(float(self.pitch)))

    def as_array(self):
        """Return the angles as a float32 [roll, pitch, yaw] array."""
        return np.array([self.roll, self.pitch, self.yaw], dtype=ATTITUDE_DTYPE)

    def degrees(self):
        """Return [roll, pitch, yaw] in degrees as a float64 array."""
        return np.degrees(self.as_array().astype(np.double))

    def to_quaternion(self):
        """Convert to a quaternion."""
        return Quaternion.from_array(euler2quat(self.as_array()))

    def to_dcm(self):
        """Convert to a rotation matrix."""
        return RotationMatrix(euler2dcm(self.as_array()))


@dataclass(frozen=True, eq=False)
class RotationMatrix:
    """Row-major 3x3 direction cosine matrix.

    Attributes
    ----------
    matrix : np.ndarray
        Read-only float32 array, shape (3, 3)

    Notes
    -----
    The matrix is expected to be a proper rotation (orthonormal, determinant
    +1). This is not validated; conversions of a malformed matrix return
    meaningless values or NaN without raising.
    """
    matrix: np.ndarray = field(default_factory=lambda: IDENTITY_DCM.copy())

    def __post_init__(self):
        C = np.array(self.matrix, dtype=ATTITUDE_DTYPE)
        if C.shape != DCM_SHAPE:
            raise ValueError(f"RotationMatrix requires shape {DCM_SHAPE}, got {C.shape}")
        C.flags.writeable = False
        object.__setattr__(self, 'matrix', C)

    @classmethod
    def identity(cls):
        """Null rotation."""
        return cls(IDENTITY_DCM)

    def __getitem__(self, index):
        return self.matrix[index]

    def __eq__(self, other):
        if not isinstance(other, RotationMatrix):
            return NotImplemented
        return bool(np.array_equal(self.matrix, other.matrix))

    def __hash__(self):
        return hash(tuple(self.matrix.ravel().tolist()))

    def as_array(self):
        """Return a writable float32 copy of the matrix."""
        return self.matrix.copy()

    def to_euler(self):
        """Convert to roll-pitch-yaw euler angles.

        At gimbal lock roll is reported as zero and the combined rotation
        about the aligned axis as yaw.
        """
        euler = EulerAngles.from_array(dcm2euler(self.as_array()))
        if euler.is_gimbal_locked:
            logger.debug(f"Gimbal lock at pitch={euler.pitch:.6f} rad, "
                         f"roll fixed to 0, yaw={euler.yaw:.6f} rad")
        return euler

    def to_quaternion(self):
        """Convert to a quaternion."""
        return Quaternion.from_array(dcm2quat(self.as_array()))


__all__ = ['Quaternion', 'EulerAngles', 'RotationMatrix']
