[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zfslocalpv"
version = "0.1.0"
description = "Resource models and builders for ZFS local persistent volumes, snapshots, backups, restores and nodes"
requires-python = ">=3.10"
dependencies = []
keywords = ["zfs", "storage", "volumes", "snapshots", "backup", "custom-resources"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zfslocalpv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
