[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdgame"
version = "0.1.0"
description = "Pure-Python building blocks for 2D games: vectors, rectangles, colours, timers, state machines, input tracking, cameras, sprite batching, bitmap-font layout and scene management."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "state-machine", "sprite-batch", "camera", "scenes", "input", "timer"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sdgame"]

[tool.hatch.build.targets.sdist]
include = ["sdgame", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
