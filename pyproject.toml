[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacetrader"
version = "0.1.0"
description = "Ship, skill, commodity market and contract models for a space trading simulation game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "trading", "space", "economy", "market"]
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

[tool.hatch.build.targets.wheel]
packages = ["spacetrader"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
