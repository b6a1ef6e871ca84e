[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gmousectl"
version = "0.1.0"
description = "Command-line configuration and status reporting for Glorious Model O/D mice over hidraw"
requires-python = ">=3.10"
dependencies = []
keywords = ["mouse", "hid", "hidraw", "glorious", "rgb", "dpi", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gmousectl = "gmousectl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gmousectl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
