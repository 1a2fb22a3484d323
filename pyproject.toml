[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stackcheck"
version = "0.1.0"
description = "Checker for two-stack sorting instruction sequences, with a bench summary, a terminal view and animations"
requires-python = ">=3.10"
keywords = ["stacks", "sorting", "checker", "terminal", "puzzle", "animation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stackcheck = "stackcheck.checker:main"

[tool.hatch.build.targets.wheel]
packages = ["stackcheck"]

[tool.pytest.ini_options]
addopts = "-ra"
