[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "intervalkit"
version = "0.1.0"
description = "Closed floating-point intervals, typed variable boxes with bisection, and small numeric helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["interval", "box", "bisection", "floating-point", "rounding", "options"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["intervalkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
