"""Body twist commands that drive a robot through a list of waypoints."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from .diff_drive import Pose
from .geometry import Twist2D, Vector2D, normalize_angle_pi

__all__ = ["Waypoints"]

logger = logging.getLogger(__name__)


class Waypoints:
    """Generates twists that move a robot between waypoints in turn."""

    def __init__(
        self, way_pts: Sequence[Vector2D], rot_vel: float, trans_vel: float
    ) -> None:
        self._pts = list(way_pts)
        if not self._pts:
            raise ValueError("at least one waypoint is required")
        self._idx = 0
        self._ctr = 0
        self._htol = 0.02
        self._ptol = 0.025
        self._rot_vel = rot_vel
        self._trans_vel = trans_vel
        self._k_rot = 0.0
        self._cycle_complete = False

    def set_gain(self, k_rot: float) -> None:
        """Set the proportional gain used for turning in closed loop."""
        self._k_rot = k_rot

    def next_waypoint(self, pose: Pose) -> Twist2D:
        """Return a bang-bang twist towards the current waypoint."""
        self._check_reached(pose)
        h_err = normalize_angle_pi(self._heading_error(pose))
        if math.fabs(h_err) < self._htol:
            return Twist2D(0.0, self._trans_vel, 0.0)
        w = self._rot_vel if h_err > 0 else -self._rot_vel
        return Twist2D(w, 0.0, 0.0)

    def next_waypoint_closed_loop(self, pose: Pose) -> Twist2D:
        """Return a proportional twist towards the current waypoint.

        After one full cycle through the waypoints a zero twist is returned.
        """
        self._check_reached(pose)
        if self._cycle_complete:
            return Twist2D()
        h_err = normalize_angle_pi(self._heading_error(pose))
        if math.fabs(h_err) < self._htol:
            return Twist2D(0.0, self._trans_vel, 0.0)
        w = min(max(self._k_rot * h_err, -self._rot_vel), self._rot_vel)
        return Twist2D(w, 0.0, 0.0)

    def _check_reached(self, pose: Pose) -> None:
        if self._distance(pose) < self._ptol:
            logger.info("Reached waypoint: %d", self._idx)
            self._advance()

    def _advance(self) -> None:
        self._idx += 1
        self._ctr += 1
        if self._idx % len(self._pts) == 0:
            self._idx = 0
        if self._ctr == len(self._pts) + 1:
            self._cycle_complete = True
            logger.info("One cycle complete")
            return
        target = self._pts[self._idx]
        logger.info(
            "Headed to waypoint: %d at [%g %g]", self._idx, target.x, target.y
        )

    def _distance(self, pose: Pose) -> float:
        target = self._pts[self._idx]
        return math.hypot(target.x - pose.x, target.y - pose.y)

    def _heading_error(self, pose: Pose) -> float:
        target = self._pts[self._idx]
        bearing = math.atan2(target.y - pose.y, target.x - pose.x)
        return bearing - pose.theta