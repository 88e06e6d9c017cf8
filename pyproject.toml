[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ipmibmc"
version = "0.1.0"
description = "Building blocks for an IPMI v2.0 and DCMI remote console: wire formats, RMCP+ key derivation and a UDP transport."
requires-python = ">=3.10"
keywords = ["ipmi", "dcmi", "bmc", "rmcp", "rakp", "out-of-band", "server management"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: System :: Hardware",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ipmibmc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
