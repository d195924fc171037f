import math

import pytest

from rigid2d.diff_drive import DiffDrive, Pose, WheelVelocities
from rigid2d.geometry import PI, Twist2D


@pytest.fixture
def drive():
    return DiffDrive(Pose(0.0, 0.0, 0.0), 1.0, 0.02)


def test_twist_to_wheels(drive):
    vel = drive.twist_to_wheels(Twist2D(1.0, 0.0, 0.0))
    assert vel.ul == pytest.approx(-25, abs=1e-6)
    assert vel.ur == pytest.approx(25, abs=1e-6)

    vel = drive.twist_to_wheels(Twist2D(0.0, 1.0, 0.0))
    assert vel.ul == pytest.approx(50, abs=1e-6)
    assert vel.ur == pytest.approx(50, abs=1e-6)

    vel = drive.twist_to_wheels(Twist2D(1.0, 1.0, 0.0))
    assert vel.ul == pytest.approx(25, abs=1e-6)
    assert vel.ur == pytest.approx(75, abs=1e-6)


def test_twist_to_wheels_rejects_lateral_velocity(drive):
    with pytest.raises(ValueError):
        drive.twist_to_wheels(Twist2D(0.0, 1.0, 0.5))


def test_wheels_to_twist(drive):
    twist = drive.wheels_to_twist(WheelVelocities(10, 10))
    assert twist.w == pytest.approx(0, abs=1e-6)
    assert twist.vx == pytest.approx(0.2, abs=1e-6)
    assert twist.vy == pytest.approx(0, abs=1e-6)

    twist = drive.wheels_to_twist(WheelVelocities(-10, 10))
    assert twist.w == pytest.approx(0.4, abs=1e-6)
    assert twist.vx == pytest.approx(0, abs=1e-6)
    assert twist.vy == pytest.approx(0, abs=1e-6)

    twist = drive.wheels_to_twist(WheelVelocities(0, 10))
    assert twist.w == pytest.approx(0.2, abs=1e-6)
    assert twist.vx == pytest.approx(0.1, abs=1e-6)
    assert twist.vy == pytest.approx(0, abs=1e-6)


def test_pure_translation_odom(drive):
    angle = PI / 30
    vel = drive.update_odometry(angle, angle)
    pose = drive.pose()
    assert vel.ul == pytest.approx(0.10472, abs=1e-3)
    assert vel.ur == pytest.approx(0.10472, abs=1e-3)
    assert pose.theta == pytest.approx(0, abs=1e-3)
    assert pose.x == pytest.approx(0.0020944, abs=1e-3)
    assert pose.y == pytest.approx(0, abs=1e-3)


def test_no_movement_odom(drive):
    vel = drive.update_odometry(0, 0)
    pose = drive.pose()
    assert vel.ul == pytest.approx(0.0, abs=1e-3)
    assert vel.ur == pytest.approx(0.0, abs=1e-3)
    assert pose.theta == pytest.approx(0.0, abs=1e-3)
    assert pose.x == pytest.approx(0.0, abs=1e-3)
    assert pose.y == pytest.approx(0.0, abs=1e-3)


def test_pure_rotation_odom(drive):
    vel = drive.update_odometry(-PI / 30, PI / 30)
    pose = drive.pose()
    assert vel.ul == pytest.approx(-0.10472, abs=1e-3)
    assert vel.ur == pytest.approx(0.10472, abs=1e-3)
    assert pose.theta == pytest.approx(0.00418879, abs=1e-3)
    assert pose.x == pytest.approx(0, abs=1e-3)
    assert pose.y == pytest.approx(0, abs=1e-3)


def test_trans_rot_odom(drive):
    vel = drive.update_odometry(0, PI / 30)
    pose = drive.pose()
    assert vel.ul == pytest.approx(0, abs=1e-3)
    assert vel.ur == pytest.approx(0.10472, abs=1e-3)
    assert pose.theta == pytest.approx(0.0020944, abs=1e-3)
    assert pose.x == pytest.approx(0.0010472, abs=1e-3)
    assert pose.y == pytest.approx(0, abs=1e-3)


def test_straight_line_feedforward(drive):
    drive.feedforward(Twist2D(0.0, 0.01, 0.0))
    pose = drive.pose()
    assert pose.theta == pytest.approx(0, abs=1e-3)
    assert pose.x == pytest.approx(0.01, abs=1e-3)
    assert pose.y == pytest.approx(0, abs=1e-3)


def test_rotation_feedforward(drive):
    drive.feedforward(Twist2D(PI / 10, 0.0, 0.0))
    pose = drive.pose()
    assert pose.theta == pytest.approx(0.314159, abs=1e-3)
    assert pose.x == pytest.approx(0, abs=1e-3)
    assert pose.y == pytest.approx(0, abs=1e-3)


def test_trans_rot_feedforward(drive):
    drive.feedforward(Twist2D(PI / 10, 0.01, 0.0))
    pose = drive.pose()
    assert pose.theta == pytest.approx(0.314159, abs=1e-3)
    assert pose.x == pytest.approx(0.00983632, abs=1e-3)
    assert pose.y == pytest.approx(0.00155792, abs=1e-3)


def test_feedforward_matches_update_odometry():
    drive_1 = DiffDrive(Pose(), 1.0, 0.02)
    drive_2 = DiffDrive(Pose(), 1.0, 0.02)

    drive_1.feedforward(Twist2D(0.0, 0.01, 0.0))
    pose_1 = drive_1.pose()
    encoder_1 = drive_1.encoders()
    vel_1 = drive_1.wheel_velocities()

    drive_2.update_odometry(encoder_1.left, encoder_1.right)
    pose_2 = drive_2.pose()
    encoder_2 = drive_2.encoders()
    vel_2 = drive_2.wheel_velocities()

    assert pose_1.theta == pytest.approx(pose_2.theta, abs=1e-3)
    assert pose_1.x == pytest.approx(pose_2.x, abs=1e-3)
    assert pose_1.y == pytest.approx(pose_2.y, abs=1e-3)
    assert encoder_1.left == pytest.approx(encoder_2.left, abs=1e-3)
    assert encoder_1.right == pytest.approx(encoder_2.right, abs=1e-3)
    assert vel_1.ul == pytest.approx(vel_2.ul, abs=1e-3)
    assert vel_1.ur == pytest.approx(vel_2.ur, abs=1e-3)


def test_default_geometry():
    drive = DiffDrive()
    assert drive.pose() == Pose(0.0, 0.0, 0.0)
    vel = drive.twist_to_wheels(Twist2D(1.0, 0.0, 0.0))
    assert vel.ul == pytest.approx(-2.5)
    assert vel.ur == pytest.approx(2.5)


def test_reset_moves_pose_but_keeps_encoders(drive):
    drive.feedforward(Twist2D(0.0, 0.01, 0.0))
    before = drive.encoders()
    drive.reset(Pose(1.0, 2.0, 3.0))
    assert drive.pose() == Pose(1.0, 2.0, 3.0)
    assert drive.encoders() == before


def test_pose_heading_is_wrapped():
    drive = DiffDrive(Pose(3 * PI / 2, 0.0, 0.0), 1.0, 0.02)
    assert drive.pose().theta == pytest.approx(-PI / 2)


def test_encoders_start_at_zero(drive):
    enc = drive.encoders()
    assert (enc.left, enc.right) == (0.0, 0.0)
    assert drive.wheel_velocities() == WheelVelocities(0.0, 0.0)


def test_feedforward_encoders_stay_wrapped(drive):
    drive.feedforward(Twist2D(0.0, 1.0, 0.0))
    enc = drive.encoders()
    assert -math.pi <= enc.left < math.pi
    assert -math.pi <= enc.right < math.pi