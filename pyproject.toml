[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scorpsim"
version = "0.1.0"
description = "Building blocks for a toric-world predator/prey simulation: vectors, colliders, a minimal JSON model, random draws and statistics graphs."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "artificial-life", "collision", "toric-world", "json", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scorpsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
