[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskbench"
version = "0.1.0"
description = "Small data-processing exercises with sample data and an interactive task menu"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "algorithms",
    "graphs",
    "scheduling",
    "grouping",
    "bfs",
    "dfs",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taskbench = "taskbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["taskbench"]

[tool.pytest.ini_options]
addopts = "-ra"
