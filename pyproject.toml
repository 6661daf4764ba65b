[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filesql"
version = "0.1.0"
description = "A small SQL-like database that keeps its tables in plain text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["sql", "database", "text files", "shell"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
filesql = "filesql.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["filesql"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
