[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chargefield"
version = "0.1.0"
description = "Interactive 2D simulation of charged particles and their electric field"
requires-python = ">=3.10"
keywords = ["physics", "electrostatics", "coulomb", "simulation", "electric field", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Education",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chargefield = "chargefield.app:main"

[tool.hatch.build.targets.wheel]
packages = ["chargefield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
