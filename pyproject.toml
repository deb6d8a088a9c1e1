[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gitscan"
version = "1.0.0"
description = "Find Git repositories with uncommitted changes under a directory tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "scanner", "uncommitted", "status", "repositories"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gus = "gitscan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gitscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
