[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ringmv"
version = "0.1.0"
description = "Dense matrix-vector multiplication benchmark with a ring exchange of the right-hand-side vector between ranks"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["benchmark", "matrix-vector", "hpc", "ring", "distributed"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ringmv = "ringmv.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ringmv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
