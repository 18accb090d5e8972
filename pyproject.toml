[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "carsim"
version = "1.0.0"
description = "A terminal car simulator with people, bank accounts, vehicles and dealerships saved as JSON"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "cars", "dealership", "cli", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
carsim = "carsim.cli:main"

[tool.setuptools.packages.find]
include = ["carsim*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
