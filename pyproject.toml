[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "widgetlab"
version = "0.1.0"
description = "Small interactive widget models: boids flocking, Game of Life, keyed lists, a CRM form, a counter and a Markdown renderer"
requires-python = ">=3.10"
keywords = [
    "boids",
    "flocking",
    "game-of-life",
    "cellular-automaton",
    "markdown",
    "widgets",
    "simulation",
    "ui",
]
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
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "markdown-it-py",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
widgetlab-boids = "widgetlab.boids_app:main"
widgetlab-life = "widgetlab.life:main"

[tool.hatch.build.targets.wheel]
packages = ["widgetlab"]

[tool.hatch.build.targets.sdist]
include = [
    "widgetlab",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
