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
Attitude module for conversions between rotation representations.

This module provides functions for converting between:
- Euler angles (roll-pitch-yaw, intrinsic 'ZYX')
- Rotation matrices (row-major 3x3 direction cosine matrices)
- Quaternions ([w, x, y, z], scalar first)

All functions are numba-compiled, stateless and thread safe. They compute in
double precision and return float32 arrays. No input is validated: a non-unit
quaternion or non-orthonormal matrix yields deterministic but meaningless
output (possibly NaN) and never raises.

References:
    NASA Mission Planning and Analysis Division, "Euler Angles, Quaternions,
    and Transformation Matrices" (1977)
"""

from .dcm import dcm2euler, dcm2quat, is_gimbal_lock
from .euler import euler2dcm, euler2quat, rot_x, rot_y, rot_z
from .quaternion import quat2dcm, quat2euler

__all__ = [
    'dcm2euler', 'dcm2quat', 'is_gimbal_lock',
    'euler2dcm', 'euler2quat', 'rot_x', 'rot_y', 'rot_z',
    'quat2euler', 'quat2dcm',
]
