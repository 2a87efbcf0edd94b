[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reefbeat"
version = "0.1.0"
description = "Game-logic core for a rhythm-driven underwater fishing game: timers, logging, save data, boss patterns, dialog, fish spawning and post-processing plans."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rhythm", "fishing", "boss", "dialog", "save-data", "timer"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reefbeat"]

[tool.pytest.ini_options]
addopts = "-ra"
