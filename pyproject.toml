[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yapp"
version = "0.1.0"
description = "Yet Another Pac-Man Project: a maze-chase arcade game with four ghosts, dots, pellets and a high score."
requires-python = ">=3.10"
keywords = ["pacman", "arcade", "game", "maze", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
yapp = "yapp.app:main"

[tool.hatch.build.targets.wheel]
packages = ["yapp"]

[tool.pytest.ini_options]
addopts = "-ra"
