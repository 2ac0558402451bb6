[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sokoban"
version = "0.1.0"
description = "A tile-based Sokoban puzzle game on pygame with animated pushes, level files and step counting."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["sokoban", "puzzle", "game", "pygame", "tiles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sokoban = "sokoban.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sokoban"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
