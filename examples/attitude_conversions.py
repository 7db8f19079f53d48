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

"""Example usage of the attitude conversions"""

import numpy as np
from pyattitude import (
    EulerAngles, RotationMatrix, dcm2euler, dcm2quat, euler2dcm, euler2quat, quat2dcm, quat2euler
)
from pyattitude.logger import setup_logger


# Example 1: Array functions
def example_array_conversions():
    """Convert a telemetry attitude between all three representations"""
    print("=== Example 1: Array Conversions ===\n")

    e = np.radians(np.array([10.0, -5.0, 135.0], dtype=np.float32))
    print(f"Euler angles [deg]:   {np.degrees(e)}")

    q = euler2quat(e)
    print(f"Quaternion [w x y z]: {q}")

    C = quat2dcm(q)
    print(f"Rotation matrix:\n{C}")

    print(f"Back to euler [deg]:  {np.degrees(dcm2euler(C))}")
    print(f"Via quaternion [deg]: {np.degrees(quat2euler(q))}")
    print(f"Matrix to quaternion: {dcm2quat(euler2dcm(e))}\n")


# Example 2: Value types
def example_value_types():
    """Same conversions through the immutable value types"""
    print("=== Example 2: Value Types ===\n")

    attitude = EulerAngles.from_degrees(roll=90.0, pitch=0.0, yaw=0.0)
    q = attitude.to_quaternion()
    print(f"{attitude} -> {q}")
    print(f"Quaternion norm: {q.norm:.7f}")
    print(f"Rotation matrix:\n{q.to_dcm().matrix}\n")


# Example 3: Gimbal lock
def example_gimbal_lock():
    """Pitch at 90 deg: roll is fixed to zero and yaw absorbs the rest"""
    print("=== Example 3: Gimbal Lock ===\n")

    setup_logger("pyattitude", "DEBUG")

    C = RotationMatrix(euler2dcm(np.array([0.3, np.pi / 2, 0.7], dtype=np.float32)))
    e = C.to_euler()
    print(f"Input roll=0.3, yaw=0.7 -> roll={e.roll:.4f}, yaw={e.yaw:.4f} (yaw - roll = 0.4)")
    print(f"Quaternion is unaffected: {C.to_quaternion()}\n")


if __name__ == "__main__":
    example_array_conversions()
    example_value_types()
    example_gimbal_lock()
