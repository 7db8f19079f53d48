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

"""
Attitude conversion from rotation matrices.

This module provides functions for converting from Direction Cosine Matrices (DCM)
to euler angles and quaternions. Matrices are row-major 3x3 proper rotations and
euler angles follow the intrinsic 'ZYX' (yaw-pitch-roll) sequence.

Input matrices are assumed orthonormal with determinant +1 and are never
validated. A non-orthonormal matrix silently produces meaningless angles or
NaN (e.g. |C[2,0]| > 1 makes the pitch NaN); detecting that is up to the caller.

References:
    NASA Mission Planning and Analysis Division, "Euler Angles, Quaternions,
    and Transformation Matrices" (1977)

    S. W. Shepperd, "Quaternion from Rotation Matrix", Journal of Guidance
    and Control, Vol. 1, No. 3 (1978)
"""

import numpy as np
from numba import njit

from ..core.constants import GIMBAL_LOCK_THRESHOLD, HALF_PI


@njit(cache=True)
def is_gimbal_lock(theta):
    """
    Check whether a pitch angle lies in the gimbal lock region.

    Parameters
    ----------
    theta : float
        Pitch angle in radians

    Returns
    -------
    bool
        True if pitch is within GIMBAL_LOCK_THRESHOLD of +π/2 or -π/2
    """
    return (abs(theta - HALF_PI) < GIMBAL_LOCK_THRESHOLD or
            abs(theta + HALF_PI) < GIMBAL_LOCK_THRESHOLD)


@njit(cache=True, error_model='numpy')
def dcm2euler(C):
    """
    Convert 'ZYX' rotation matrix into corresponding euler angles (roll-pitch-yaw).

    Pitch is recovered as ``asin(-C[2,0])`` and rounded to float32 before the
    singularity test. Near pitch = ±π/2 roll and yaw are not separable; in that
    case roll is fixed to zero and the whole rotation about the aligned axis is
    reported as yaw, ``atan2(C[1,2] - C[0,1], C[0,2] + C[1,1])``.

    Parameters
    ----------
    C : ndarray, shape (3, 3)
        Rotation matrix (row-major)

    Returns
    -------
    e : ndarray, shape (3,), float32
        Euler angles [roll, pitch, yaw] in radians
    """
    R = C.astype(np.double)
    theta = np.float32(np.arcsin(-R[2, 0]))

    if is_gimbal_lock(theta):
        phi = 0.0
        psi = np.arctan2(R[1, 2] - R[0, 1], R[0, 2] + R[1, 1])
    else:
        phi = np.arctan2(R[2, 1], R[2, 2])
        psi = np.arctan2(R[1, 0], R[0, 0])

    e = np.empty(3, dtype=np.float32)
    e[0] = phi
    e[1] = theta
    e[2] = psi
    return e


@njit(cache=True, error_model='numpy')
def dcm2quat(C):
    """
    Convert rotation matrix into corresponding quaternion (Shepperd's method).

    The branch is chosen on the largest of the trace and the diagonal elements
    so the divisor never approaches zero for a proper rotation:

    - trace > 0: w is extracted first from sqrt(trace + 1).
    - otherwise: the vector component for the largest diagonal element C[i,i]
      is extracted first. The diagonal is scanned from index 0 and a later
      element only wins on strictly greater value, so ties resolve to the
      lowest index. That component always comes out positive, which fixes
      the sign of the returned quaternion.

    Parameters
    ----------
    C : ndarray, shape (3, 3)
        Rotation matrix (row-major)

    Returns
    -------
    q : ndarray, shape (4,), float32
        Quaternion [w, x, y, z]
    """
    R = C.astype(np.double)
    q = np.zeros(4, dtype=np.double)
    tr = R[0, 0] + R[1, 1] + R[2, 2]

    if tr > 0.0:
        s = np.sqrt(tr + 1.0)
        q[0] = s * 0.5
        s = 0.5 / s
        q[1] = (R[2, 1] - R[1, 2]) * s
        q[2] = (R[0, 2] - R[2, 0]) * s
        q[3] = (R[1, 0] - R[0, 1]) * s
    else:
        i = 0
        for n in range(1, 3):
            if R[n, n] > R[i, i]:
                i = n
        j = (i + 1) % 3
        k = (i + 2) % 3
        s = np.sqrt(R[i, i] - R[j, j] - R[k, k] + 1.0)
        q[i + 1] = s * 0.5
        s = 0.5 / s
        q[j + 1] = (R[i, j] + R[j, i]) * s
        q[k + 1] = (R[k, i] + R[i, k]) * s
        q[0] = (R[k, j] - R[j, k]) * s

    return q.astype(np.float32)
