[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moviemanager"
version = "0.1.0"
description = "A small movie catalogue model with genre-specific scoring for action, animation and sci-fi films."
requires-python = ">=3.10"
dependencies = []
keywords = ["movies", "catalogue", "film", "scoring"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["moviemanager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
