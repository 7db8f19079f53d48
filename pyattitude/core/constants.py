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

"""Attitude Constants and Numerical Policy"""

import numpy as np

# Storage precision of all converted attitude values
ATTITUDE_DTYPE = np.float32

# Angles
TWO_PI = 2 * np.pi
# pi/2 rounded to storage precision, the pitch singularity seen by dcm2euler
HALF_PI = float(np.float32(0.5 * np.pi))

# Gimbal lock: pitch within this distance of +/-pi/2 (rad, ~0.057 deg)
GIMBAL_LOCK_THRESHOLD = 1.0e-3

# Null rotation
IDENTITY_QUATERNION = np.array([1.0, 0.0, 0.0, 0.0], dtype=ATTITUDE_DTYPE)  # [w, x, y, z]
IDENTITY_DCM = np.eye(3, dtype=ATTITUDE_DTYPE)
IDENTITY_QUATERNION.flags.writeable = False
IDENTITY_DCM.flags.writeable = False

# Array shapes
QUAT_SIZE = 4
EULER_SIZE = 3
DCM_SHAPE = (3, 3)

__all__ = [
    'ATTITUDE_DTYPE', 'TWO_PI', 'HALF_PI', 'GIMBAL_LOCK_THRESHOLD',
    'IDENTITY_QUATERNION', 'IDENTITY_DCM',
    'QUAT_SIZE', 'EULER_SIZE', 'DCM_SHAPE',
]
