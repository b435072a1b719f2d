[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snark_verifier"
version = "0.1.0"
description = "Building blocks for a generic SNARK verifier: BN254 field arithmetic, loader abstractions, cost records, a standard PLONK example circuit and aggregation data types"
requires-python = ">=3.10"
keywords = ["snark", "plonk", "kzg", "zero-knowledge", "verifier", "bn254"]
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
    "Topic :: Security :: Cryptography",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["snark_verifier"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
