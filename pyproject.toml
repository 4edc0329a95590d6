[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marioworld"
version = "0.1.0"
description = "Game logic for a side-scrolling platformer: geometry, collision, SVG level outlines, sprites, camera, pick-ups and the player avatar."
requires-python = ">=3.10"
dependencies = []
keywords = ["platformer", "game", "collision", "geometry", "svg", "sprite"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["marioworld"]

[tool.pytest.ini_options]
addopts = "-ra"
