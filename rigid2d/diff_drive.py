"""Kinematics and odometry of a differential drive robot."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Transform2D, Twist2D, Vector2D, normalize_angle_pi

__all__ = ["Pose", "WheelVelocities", "WheelEncoders", "DiffDrive"]


@dataclass
class Pose:
    """Planar pose of a robot: heading and position."""

    theta: float = 0.0
    x: float = 0.0
    y: float = 0.0


@dataclass
class WheelVelocities:
    """Angular velocities of the left and right wheels."""

    ul: float = 0.0
    ur: float = 0.0


@dataclass
class WheelEncoders:
    """Angular positions of the left and right wheels."""

    left: float = 0.0
    right: float = 0.0


class DiffDrive:
    """A differential drive robot that tracks its pose and wheel state."""

    def __init__(
        self,
        pose: Pose | None = None,
        wheel_base: float = 0.1,
        wheel_radius: float = 0.02,
    ) -> None:
        if pose is None:
            pose = Pose()
        self._theta = pose.theta
        self._x = pose.x
        self._y = pose.y
        self._wheel_base = wheel_base
        self._wheel_radius = wheel_radius
        self._left = 0.0
        self._right = 0.0
        self._ul = 0.0
        self._ur = 0.0

    def twist_to_wheels(self, twist: Twist2D) -> WheelVelocities:
        """Return the wheel velocities that produce ``twist`` in the body frame."""
        if twist.vy != 0:
            raise ValueError("Twist cannot have y velocity component")
        d = self._wheel_base / 2
        return WheelVelocities(
            ul=(1 / self._wheel_radius) * (-d * twist.w + twist.vx),
            ur=(1 / self._wheel_radius) * (d * twist.w + twist.vx),
        )

    def wheels_to_twist(self, vel: WheelVelocities) -> Twist2D:
        """Return the body twist produced by the given wheel velocities."""
        r = self._wheel_radius
        return Twist2D(
            w=r / self._wheel_base * (vel.ur - vel.ul),
            vx=r * 0.5 * (vel.ul + vel.ur),
            vy=0.0,
        )

    def _advance(self, twist: Twist2D) -> None:
        step = Transform2D().integrate_twist(twist)
        world_to_body = Transform2D(Vector2D(self._x, self._y), self._theta)
        moved = (world_to_body * step).displacement()
        self._theta = normalize_angle_pi(moved.theta)
        self._x = moved.x
        self._y = moved.y

    def update_odometry(self, left: float, right: float) -> WheelVelocities:
        """Update the pose from new encoder angles and return the wheel velocities."""
        vel = WheelVelocities(
            ul=normalize_angle_pi(left - self._left),
            ur=normalize_angle_pi(right - self._right),
        )
        self._ul = vel.ul
        self._ur = vel.ur
        self._left = normalize_angle_pi(left)
        self._right = normalize_angle_pi(right)
        self._advance(self.wheels_to_twist(vel))
        return vel

    def feedforward(self, cmd: Twist2D) -> None:
        """Move the robot as if it followed ``cmd`` for one time unit."""
        vel = self.twist_to_wheels(cmd)
        self._ul = normalize_angle_pi(vel.ul)
        self._ur = normalize_angle_pi(vel.ur)
        self._left = normalize_angle_pi(self._left + vel.ul)
        self._right = normalize_angle_pi(self._right + vel.ur)
        self._advance(cmd)

    def pose(self) -> Pose:
        """Return the current pose with the heading wrapped to [-pi, pi)."""
        return Pose(normalize_angle_pi(self._theta), self._x, self._y)

    def wheel_velocities(self) -> WheelVelocities:
        """Return the wheel velocities from the last update."""
        return WheelVelocities(self._ul, self._ur)

    def reset(self, pose: Pose) -> None:
        """Place the robot at ``pose``, keeping the wheel state."""
        self._theta = pose.theta
        self._x = pose.x
        self._y = pose.y

    def encoders(self) -> WheelEncoders:
        """Return the current wheel encoder angles."""
        return WheelEncoders(self._left, self._right)