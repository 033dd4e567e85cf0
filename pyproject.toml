[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bddkit"
version = "0.1.0"
description = "A small reduced ordered binary decision diagram (ROBDD) manager with Graphviz export"
requires-python = ">=3.10"
dependencies = []
keywords = ["bdd", "robdd", "binary decision diagram", "boolean functions", "eda", "formal verification"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bddkit = "bddkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bddkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
