[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "charlinks"
version = "0.1.0"
description = "Linked lists and binary trees of single characters, with counting, searching and traversal helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "singly linked list", "binary tree", "binary search tree", "data structures"]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["charlinks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
