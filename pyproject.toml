[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinysql"
version = "0.1.0"
description = "A small in-memory SQL-style table with typed values, fixed and variable character strings and calendar dates"
requires-python = ">=3.10"
dependencies = []
keywords = ["sql", "table", "database", "varchar", "in-memory"]
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinysql = "tinysql.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinysql"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
