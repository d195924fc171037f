[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rigid2d"
version = "0.1.0"
description = "Planar rigid-body transforms, differential-drive kinematics and waypoint following"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["robotics", "kinematics", "rigid body", "transform", "odometry", "differential drive", "waypoints"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rigid2d = "rigid2d.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rigid2d"]

[tool.pytest.ini_options]
addopts = "-ra"
