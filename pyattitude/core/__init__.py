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

"""Core Attitude Module.

This module provides the fundamental pieces shared by the attitude conversions:

- **Constants and Parameters**: storage precision, the gimbal lock threshold,
  π/2 at storage precision, and the null rotation in each representation
- **Data Structures**: immutable value types for quaternions, rotation
  matrices and euler angles, each able to convert itself into the others

Example Usage:
    >>> from pyattitude.core import *
    >>>
    >>> e = EulerAngles(roll=np.pi/2, pitch=0.0, yaw=0.0)
    >>> q = e.to_quaternion()          # ~[0.70711, 0.70711, 0, 0]
    >>> C = q.to_dcm()
    >>> C.to_euler()                   # back to roll=π/2, pitch=0, yaw=0
"""

from .constants import *
from .data_structures import *
