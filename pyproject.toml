[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "curtainsdrawn"
version = "0.1.0"
description = "A terminal horror game: survive the night by typing commands into an animatronic interfacing console."
requires-python = ">=3.10"
keywords = ["game", "terminal", "horror", "text-based", "tui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "blessed",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
curtainsdrawn = "curtainsdrawn.app:main"

[tool.hatch.build.targets.wheel]
packages = ["curtainsdrawn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
