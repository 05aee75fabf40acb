[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainhash"
version = "0.1.0"
description = "A small hash table of string keys that resolves collisions with sorted chains"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "separate chaining", "collisions", "data structures"]
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
chainhash-demo = "chainhash.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["chainhash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
