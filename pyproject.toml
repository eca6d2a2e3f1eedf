[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flashkv"
version = "0.1.0"
description = "A small key-value store that appends fixed-size records to an emulated flash region"
requires-python = ">=3.10"
dependencies = []
keywords = ["key-value", "flash", "database", "embedded", "storage"]
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
flashkv-demo = "flashkv.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["flashkv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
