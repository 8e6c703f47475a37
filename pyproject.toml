[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libmx"
version = "0.1.0"
description = "Small utility library: string helpers, byte-buffer operations, a singly linked list and a buffered line reader"
requires-python = ">=3.10"
keywords = ["strings", "memory", "linked-list", "utilities", "line-reader"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["libmx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
