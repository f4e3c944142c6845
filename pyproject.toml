[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "resourcekit"
version = "0.1.0"
description = "A small registry for named, typed resources with JSON persistence."
requires-python = ">=3.10"
dependencies = []
keywords = ["resources", "registry", "serialization", "json", "fnv1a"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["resourcekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
