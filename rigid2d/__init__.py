"""Planar rigid-body transforms, differential-drive kinematics, waypoint following and sampling helpers."""

__version__ = "0.1.0"
__all__ = ["geometry", "diff_drive", "waypoints", "utilities", "cli"]