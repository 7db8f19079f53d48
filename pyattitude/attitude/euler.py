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
Attitude conversion from euler angles.

This module provides functions for converting from euler angles (roll-pitch-yaw)
to the gimbal-lock free representations. Euler angles follow the intrinsic 'ZYX'
sequence: yaw about z, then pitch about the new y, then roll about the new x.

The trigonometry is evaluated in double precision and the result is narrowed to
float32 on return. Inputs are not range checked: roll and yaw wrap through the
periodicity of sin/cos and a pitch outside [-π/2, π/2] still yields a valid
(non-canonical) rotation.

References:
    NASA Mission Planning and Analysis Division, "Euler Angles, Quaternions,
    and Transformation Matrices" (1977)
"""

import numpy as np
from numba import njit


@njit(cache=True, error_model='numpy')
def euler2dcm(e):
    """
    Convert euler angles (roll-pitch-yaw) to corresponding 'ZYX' rotation matrix.

    The rotation sequence is:
    1. Yaw (ψ) about z-axis
    2. Pitch (θ) about y-axis
    3. Roll (φ) about x-axis

    so that ``C = rot_z(ψ) @ rot_y(θ) @ rot_x(φ)``. For pitch strictly inside
    (-π/2, π/2) this is the inverse of :func:`dcm2euler`.

    Parameters
    ----------
    e : ndarray, shape (3,)
        RPY euler angles [roll, pitch, yaw] in radians

    Returns
    -------
    C : ndarray, shape (3, 3), float32
        Rotation matrix (row-major)
    """
    phi = float(e[0])
    theta = float(e[1])
    psi = float(e[2])
    sinP, cosP = np.sin(phi), np.cos(phi)
    sinT, cosT = np.sin(theta), np.cos(theta)
    sinS, cosS = np.sin(psi), np.cos(psi)
    C = np.array([[cosT*cosS, -cosP*sinS + sinP*sinT*cosS,  sinP*sinS + cosP*sinT*cosS],
                  [cosT*sinS,  cosP*cosS + sinP*sinT*sinS, -sinP*cosS + cosP*sinT*sinS],
                  [    -sinT,                   sinP*cosT,                   cosP*cosT]],
                 dtype=np.double)
    return C.astype(np.float32)


@njit(cache=True, error_model='numpy')
def euler2quat(e):
    """
    Convert euler angles (roll-pitch-yaw) to corresponding quaternion.

    The quaternion is computed using the half-angle products for the
    'ZYX' rotation sequence. No renormalization is applied; the result is
    unit norm to within rounding for any finite input.

    Parameters
    ----------
    e : ndarray, shape (3,)
        RPY euler angles [roll, pitch, yaw] in radians

    Returns
    -------
    q : ndarray, shape (4,), float32
        Quaternion [w, x, y, z]
    """
    halfP = 0.5 * float(e[0])
    halfT = 0.5 * float(e[1])
    halfS = 0.5 * float(e[2])
    sinP, cosP = np.sin(halfP), np.cos(halfP)
    sinT, cosT = np.sin(halfT), np.cos(halfT)
    sinS, cosS = np.sin(halfS), np.cos(halfS)
    q = np.array([cosP*cosT*cosS + sinP*sinT*sinS,
                  sinP*cosT*cosS - cosP*sinT*sinS,
                  cosP*sinT*cosS + sinP*cosT*sinS,
                  cosP*cosT*sinS - sinP*sinT*cosS],
                 dtype=np.double)
    return q.astype(np.float32)


@njit(cache=True)
def rot_x(phi):
    """
    Rotation matrix for a single right-handed rotation about the x-axis.

    Parameters
    ----------
    phi : float
        Roll angle in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
        Direction cosine matrix for x-axis rotation
    """
    sinP = np.sin(phi)
    cosP = np.cos(phi)
    R = np.array([[1.0,  0.0,   0.0],
                  [0.0, cosP, -sinP],
                  [0.0, sinP,  cosP]],
                 dtype=np.double)
    return R


@njit(cache=True)
def rot_y(theta):
    """Rotation matrix for a single right-handed rotation about the y-axis."""
    sinT = np.sin(theta)
    cosT = np.cos(theta)
    R = np.array([[ cosT, 0.0, sinT],
                  [  0.0, 1.0,  0.0],
                  [-sinT, 0.0, cosT]],
                 dtype=np.double)
    return R


@njit(cache=True)
def rot_z(psi):
    """Rotation matrix for a single right-handed rotation about the z-axis."""
    sinS = np.sin(psi)
    cosS = np.cos(psi)
    R = np.array([[cosS, -sinS, 0.0],
                  [sinS,  cosS, 0.0],
                  [ 0.0,   0.0, 1.0]],
                 dtype=np.double)
    return R
