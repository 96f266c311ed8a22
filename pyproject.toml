[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinygit"
version = "0.1.0"
description = "A tiny file-based version control tool: init, add, status, commit, log, checkout and branches."
requires-python = ">=3.10"
dependencies = []
keywords = ["vcs", "version-control", "snapshots", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control",
]

[project.optional-dependencies]
test = [
    "pytest",
    "freezegun",
]

[project.scripts]
tinygit = "tinygit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinygit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
