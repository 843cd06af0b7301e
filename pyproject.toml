[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maxdiversity"
version = "0.1.0"
description = "Solve the maximum diversity problem with greedy, GRASP and branch and bound algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["maximum diversity", "optimization", "grasp", "greedy", "branch and bound", "local search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
maxdiversity = "maxdiversity.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["maxdiversity"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
