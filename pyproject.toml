[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "densela"
version = "0.1.0"
description = "Small dense linear algebra toolkit: vectors, matrices and linear system solvers"
requires-python = ">=3.10"
keywords = [
    "linear algebra",
    "matrix",
    "vector",
    "determinant",
    "gaussian elimination",
    "conjugate gradient",
    "pseudo-inverse",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
densela-selftest = "densela.selftest:main"

[tool.hatch.build.targets.wheel]
packages = ["densela"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
