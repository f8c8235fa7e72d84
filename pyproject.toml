[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledquest"
version = "0.1.0"
description = "Game rules and state for a small dungeon adventure played on an 8x8 LED grid"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "adventure", "dungeon", "led-matrix", "grid"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ledquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
