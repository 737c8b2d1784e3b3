[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memoassistant"
version = "0.1.0"
description = "Task records, task ordering and SQLite-backed login sessions for a personal memo assistant"
requires-python = ">=3.10"
dependencies = []
keywords = ["memo", "tasks", "todo", "scheduling", "accounts", "sqlite", "singleton"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["memoassistant"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
