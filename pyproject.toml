[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubeworld"
version = "0.1.0"
description = "Simulation core of a voxel world: Perlin noise, block registry, entity-component system, AABB physics, movement, input timing, UI state and block atlases."
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "perlin", "noise", "ecs", "physics", "aabb", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubeworld"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
