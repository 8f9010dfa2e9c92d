[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scrivi"
version = "0.1.0"
description = "Data model, on-disk JSON formats and file and text utilities for Scrivi writing projects"
requires-python = ">=3.10"
dependencies = []
keywords = ["writing", "manuscript", "word processor", "scenes", "json", "slug"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors :: Word Processors",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scrivi"]

[tool.hatch.build.targets.sdist]
include = ["scrivi", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
