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
Attitude conversion from quaternions.

This module provides functions for converting from [w, x, y, z] quaternions
(null rotation being [1, 0, 0, 0]) to rotation matrices and 'ZYX' euler angles.

Quaternions are assumed to be unit norm. A non-unit quaternion is not an
error: it scales the resulting matrix by its squared norm, and what that does
to derived euler angles is the caller's responsibility.

References:
    NASA Mission Planning and Analysis Division, "Euler Angles, Quaternions,
    and Transformation Matrices" (1977)
"""

import numpy as np
from numba import njit

from .dcm import dcm2euler


@njit(cache=True, error_model='numpy')
def quat2dcm(q):
    """
    Convert quaternion to corresponding rotation matrix.

    The direction cosine matrix is computed directly from the squared
    components and cross terms of the quaternion in double precision.

    Parameters
    ----------
    q : ndarray, shape (4,)
        Quaternion [w, x, y, z]

    Returns
    -------
    C : ndarray, shape (3, 3), float32
        Rotation matrix (row-major)
    """
    w = float(q[0])
    x = float(q[1])
    y = float(q[2])
    z = float(q[3])
    ww, xx, yy, zz = w*w, x*x, y*y, z*z
    C = np.array([[ww + xx - yy - zz,     2*(x*y - w*z),     2*(w*y + x*z)],
                  [    2*(x*y + w*z), ww - xx + yy - zz,     2*(y*z - w*x)],
                  [    2*(x*z - w*y),     2*(w*x + y*z), ww - xx - yy + zz]],
                 dtype=np.double)
    return C.astype(np.float32)


@njit(cache=True, error_model='numpy')
def quat2euler(q):
    """
    Convert quaternion to corresponding euler angles (roll-pitch-yaw).

    Goes through the rotation matrix, so the gimbal lock handling of
    :func:`dcm2euler` applies unchanged.

    Parameters
    ----------
    q : ndarray, shape (4,)
        Quaternion [w, x, y, z]

    Returns
    -------
    e : ndarray, shape (3,), float32
        RPY euler angles [roll, pitch, yaw] in radians
    """
    return dcm2euler(quat2dcm(q))
