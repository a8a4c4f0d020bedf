[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ktoolkit"
version = "0.1.0"
description = "Game resource utilities: MD5 manifests, obscured SQLite save records, action XML reading and touch/shake motion logic"
requires-python = ">=3.10"
dependencies = []
keywords = ["md5", "checksum", "manifest", "sqlite", "game", "save-data", "xml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ktoolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
