[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nist_sts"
version = "0.1.0"
description = "Statistical tests for random and pseudorandom bit sequences, following NIST SP 800-22"
requires-python = ">=3.10"
dependencies = [
    "scipy",
]
keywords = ["randomness", "statistics", "nist", "sp800-22", "rng", "linear-complexity", "matrix-rank"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nist_sts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
