[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "piiscan"
version = "0.1.0"
description = "Detect PII columns, measure column uniqueness and scramble keys in partitioned tabular data sets"
requires-python = ">=3.10"
dependencies = []
keywords = ["pii", "privacy", "uniqueness", "dataset", "scrambling", "anonymisation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["piiscan"]

[tool.pytest.ini_options]
addopts = "-ra"
