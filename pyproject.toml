[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knightstour"
version = "1.0.0"
description = "Play the knight's tour puzzle in the terminal, with a Warnsdorff-rule solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["knight's tour", "chess", "puzzle", "warnsdorff", "terminal game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
test = ["pytest"]

[project.scripts]
knightstour = "knightstour.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["knightstour"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
