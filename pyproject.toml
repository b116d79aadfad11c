[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asciiplot"
version = "0.1.0"
description = "Plot single-variable math expressions as ASCII art in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["ascii", "plot", "graph", "expression", "rpn", "shunting-yard", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
asciiplot = "asciiplot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["asciiplot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
