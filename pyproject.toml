[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tavern_game"
version = "0.1.0"
description = "A small tavern cooking simulation built on a minimal entity-component world"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "ecs", "tavern", "cooking", "inventory"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tavern-game = "tavern_game.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tavern_game"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
