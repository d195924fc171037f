# rigid2d

Planar rigid-body motion for small mobile robots: 2-D vectors, twists and
transforms, a differential-drive model with odometry, a waypoint follower and
a few random-sampling helpers.

## Installation

```
pip install .
```

## Modules

### `rigid2d.geometry`

- `Vector2D(x, y)` supports `+`, `-` and scaling by a number from either side.
  It prints as `[x y]`.
- `Twist2D(w, vx, vy)` is an angular velocity with linear x/y velocities. It
  prints as `[w vx vy]`.
- `Transform2D(trans, radians)` is a rigid transform. Both arguments are
  optional, and leaving them out gives the identity.
  - `a * b` composes two transforms.
  - `tf.inv()` returns the inverse.
  - `tf(vector)` maps a `Vector2D`, and `tf(twist)` applies the adjoint to a
    `Twist2D`.
  - `tf.displacement()` returns a `TransformData2D(theta, x, y)`.
  - `tf.integrate_twist(twist)` composes the transform with the motion of the
    twist over one time unit.
  - A transform prints as `theta (degrees): 90 x: -1 y: 3`.
- Angle helpers:
  - `almost_equal(d1, d2, epsilon=1e-12)`
  - `deg2rad` and `rad2deg`
  - `normalize_angle_pi`, which wraps an angle into [-pi, pi)
  - `normalize_angle_2pi`, which wraps an angle into [0, 2pi)
- Vector functions:
  - `length` and `distance`.
  - `angle`, which returns radians.
  - `normalize`, which returns a `NormalVec2D`.
  - `normalize` and `angle` raise `ValueError` for a zero-length vector.
- Parsers:
  - `parse_vector("[1 2]")` reads a vector.
  - `parse_twist("1 2 2")` reads a twist.
  - `parse_transform("90 1 1")` reads a transform given as degrees, x and y. It
    also reads the printed form of a transform.
  - Each parser takes the first numbers it finds in the text. It raises
    `ValueError` when there are too few.

### `rigid2d.diff_drive`

`DiffDrive(pose=None, wheel_base=0.1, wheel_radius=0.02)` keeps a `Pose`, the
wheel encoder angles and the wheel velocities of a differential-drive robot.

- `twist_to_wheels(twist)` converts a body twist to `WheelVelocities(ul, ur)`.
  It raises `ValueError` if the twist has a `vy` component.
- `wheels_to_twist(vel)` converts wheel velocities back to a body twist.
- `update_odometry(left, right)` takes new encoder angles in radians. It
  updates the pose and returns the wheel velocities, which are the wrapped
  change in each angle.
- `feedforward(cmd)` moves the robot as if it followed the twist for one time
  unit. It also advances the encoders.
- Read the state with `pose()`, `wheel_velocities()` and `encoders()`.
  `encoders()` returns a `WheelEncoders(left, right)`.
- `reset(pose)` moves the robot to a new pose and keeps its wheel state.

### `rigid2d.waypoints`

`Waypoints(way_pts, rot_vel, trans_vel)` cycles through a non-empty list of
`Vector2D` points. When the robot comes within 0.025 of the current point, it
moves on to the next.

- `next_waypoint(pose)` returns a bang-bang twist:
  - it drives straight at `trans_vel` when the heading error is below 0.02 rad;
  - otherwise it turns in place at `±rot_vel`.
- `next_waypoint_closed_loop(pose)` turns with a proportional gain instead.
  - Set the gain with `set_gain(k_rot)`.
  - The turn rate is clamped to `±rot_vel`.
  - Once it has made one full cycle through the points, it returns a zero
    twist.

Progress messages go to the `rigid2d.waypoints` logger.

### `rigid2d.utilities`

All sampling uses the shared numpy generator returned by `get_generator()`.

- `sample_normal_distribution(mu, sigma)`
- `sample_uniform_distribution(low, high)`
- `sample_standard_normal(n)`
- `sample_multivariate_distribution(cov)` draws a zero-mean sample through a
  Cholesky factor of `cov`.
  - It raises `ValueError` for a non-square matrix.
  - It raises `numpy.linalg.LinAlgError` when `cov` is not positive definite.
- `euclidean_distance(x0, y0, x1, y1)`

## Example

```python
import math
from rigid2d.geometry import Transform2D, Twist2D, Vector2D
from rigid2d.diff_drive import DiffDrive, Pose

t_ab = Transform2D(Vector2D(1.0, 1.0), math.pi / 2)
t_bc = Transform2D(Vector2D(2.0, 2.0), 0.0)
print(t_ab * t_bc)          # theta (degrees): 90 x: -1 y: 3

drive = DiffDrive(Pose(), wheel_base=1.0, wheel_radius=0.02)
drive.feedforward(Twist2D(w=0.0, vx=0.01))
print(drive.pose())         # Pose(theta=0.0, x=0.01, y=0.0)
```

## Command line

```
rigid2d
```

The command reads whitespace-separated numbers from standard input. Square
brackets around them are ignored. It prompts for each value as it goes:

1. It reads `T_ab` and then `T_bc`, each as an angle in degrees followed by x
   and y.
2. It prints `T_ab`, `T_ba`, `T_bc`, `T_cb`, `T_ac` and `T_ca`.
3. It reads a vector and the frame it is expressed in (`a`, `b` or `c`), and
   prints the vector in all three frames.
4. It reads a twist and prints it in all three frames.

If the frame is not one of `a`, `b` or `c`, the vector and twist are read but
not printed. On malformed or missing input it prints an error to standard
error and exits with status 1.

## What it does not do

This package is pure computation. It does not:

- talk to a robot, a simulator or any messaging system;
- run a timed control loop;
- publish odometry or encoder readings.

To drive a robot, call `DiffDrive` and `Waypoints` from your own loop and send
the resulting twists yourself.

## Tests

```
pip install .[test]
pytest
```