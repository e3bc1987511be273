[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "tm2c"
version = "0.1.0"
description = "Building blocks of a distributed software transactional memory: lock tables, write sets, allocators, hashing and profiling"
requires-python = ">=3.10"
dependencies = []
keywords = ["transactional memory", "stm", "concurrency", "locking", "hash table"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["tm2c*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
