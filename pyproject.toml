[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estruturas"
version = "0.1.0"
description = "Classic data structures and algorithms: searching, matrices, lists, stacks, queues, trees, heaps and hash tables"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "searching",
    "linked list",
    "stack",
    "queue",
    "binary search tree",
    "heap",
    "hash table",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
estruturas-search = "estruturas.search:main"
estruturas-matrix = "estruturas.matrix:main"
estruturas-list = "estruturas.linked_list:main"
estruturas-figures = "estruturas.figures:main"
estruturas-expression = "estruturas.expressions:main"
estruturas-rectangles = "estruturas.rectangles:main"
estruturas-bank = "estruturas.bank:main"
estruturas-tree = "estruturas.trees:main"
estruturas-nary-tree = "estruturas.nary_tree:main"
estruturas-heap = "estruturas.heap:main"
estruturas-students = "estruturas.hashing:main"

[tool.hatch.build.targets.wheel]
packages = ["estruturas"]

[tool.pytest.ini_options]
addopts = "-ra"
