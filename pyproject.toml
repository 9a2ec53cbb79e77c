[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecfmp"
version = "0.1.0"
description = "Flow measures, filters, events and flight information regions for ECFMP air traffic flow management data"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecfmp", "atc", "flow-management", "flow-measures", "vatsim", "euroscope"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ecfmp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
