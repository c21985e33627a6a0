[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sllkit"
version = "0.1.0"
description = "Singly linked list toolkit: building, editing, searching, transforming and comparing node chains"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked-list", "singly-linked-list", "data-structures", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sllkit = "sllkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sllkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
