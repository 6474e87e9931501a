[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hestonmc"
version = "0.1.0"
description = "Monte Carlo option pricing, Greeks and counterparty risk metrics under the Heston model"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "heston",
    "monte-carlo",
    "option-pricing",
    "greeks",
    "cva",
    "longstaff-schwartz",
    "exotic-options",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hestonmc = "hestonmc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hestonmc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
