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
PyAttitude - Attitude Representation Conversions

Conversions between unit quaternions, 3x3 rotation matrices and 'ZYX' euler
angles (roll, pitch, yaw) for telemetry and control protocols, following the
NASA rotation standard conventions. Quaternion and rotation matrix are the
gimbal-lock free forms; euler angles are the human-readable one.
"""

__version__ = "1.0.0"
__author__ = "PyAttitude Development Team"
__title__ = "pyattitude"
__description__ = "Quaternion, rotation matrix and euler angle conversions"

from .core import *
from .attitude import *
