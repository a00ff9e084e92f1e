[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eternakit"
version = "0.1.0"
description = "Scoring strategies for RNA secondary-structure designs, with typed options, command-line parsing, logging and graph utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["rna", "secondary structure", "eternabot", "scoring", "design", "graph"]
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
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eternakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
