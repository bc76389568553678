[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glowbox"
version = "0.1.0"
description = "Mesh generation, scene graph, keyframe and timing utilities for a small rhythm-driven breakout-style juggling game"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "mesh",
    "geometry",
    "scene-graph",
    "tangent-space",
    "text-rendering",
    "png",
    "game",
]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["glowbox"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
