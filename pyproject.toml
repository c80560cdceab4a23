[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixeltetris"
version = "1.0.0"
description = "A pixel-art falling-block puzzle game with stages, scoring, hold and ghost pieces"
requires-python = ">=3.10"
keywords = ["tetris", "puzzle", "game", "pygame", "pixel-art"]
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixeltetris = "pixeltetris.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pixeltetris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
