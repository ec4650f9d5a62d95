[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockyard"
version = "0.1.0"
description = "A block-grid snake game, a small program launcher and a tiny HTTP request helper"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["snake", "game", "arcade", "pygame", "launcher", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blockyard-snake = "blockyard.app:main"
blockyard-launcher = "blockyard.launcher:main"

[tool.hatch.build.targets.wheel]
packages = ["blockyard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
