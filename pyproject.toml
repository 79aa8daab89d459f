[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brushwalk"
version = "0.1.0"
description = "A first-person walker that draws brush-based maps as lit, textured walls and floors"
requires-python = ">=3.10"
keywords = ["3d", "opengl", "map", "brush", "first-person", "renderer", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
brushwalk = "brushwalk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["brushwalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
