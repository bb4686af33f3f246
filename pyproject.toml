[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "airwatch"
version = "0.1.0"
description = "Air-quality sensor network analysis: per-gas averages, sensor similarity and role-based console menus."
requires-python = ">=3.10"
dependencies = []
keywords = ["air quality", "sensors", "pollution", "O3", "NO2", "SO2", "PM10"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
airwatch = "airwatch.cli:main"
airwatch-average = "airwatch.cli:average_main"

[tool.hatch.build.targets.wheel]
packages = ["airwatch"]

[tool.pytest.ini_options]
addopts = "-ra"
