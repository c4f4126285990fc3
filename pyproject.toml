[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meeus"
version = "0.1.0"
description = "Astronomical algorithms: interpolation, calendars, lunar and planetary ephemerides, orbits"
requires-python = ">=3.10"
dependencies = []
keywords = ["astronomy", "ephemeris", "julian day", "moon", "jupiter", "calendar", "kepler", "nutation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meeus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
