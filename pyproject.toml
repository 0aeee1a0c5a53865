[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelplay"
version = "0.1.0"
description = "Small pygame toys (analogue clock, flappy block, snake) and the state behind Julia-set fractal viewers"
requires-python = ">=3.10"
keywords = ["game", "snake", "flappy", "clock", "fractal", "julia", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelplay-clock = "pixelplay.clock:main"
pixelplay-flappy = "pixelplay.flappy:main"
pixelplay-snake = "pixelplay.snake:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelplay"]

[tool.pytest.ini_options]
addopts = "-ra"
