[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparkengine"
version = "0.1.0"
description = "A small game engine core: events, services, clocks, logging, input handling and a window loop."
requires-python = ">=3.10"
keywords = ["game engine", "events", "service locator", "input", "window", "pygame"]
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
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sparkengine = "sparkengine.main:main"

[tool.hatch.build.targets.wheel]
packages = ["sparkengine"]

[tool.pytest.ini_options]
addopts = "-ra"
