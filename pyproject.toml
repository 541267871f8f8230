[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ncc"
version = "0.1.0"
description = "Typed abstract syntax tree nodes and builders for a C compiler front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["c", "compiler", "ast", "syntax-tree", "front-end"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ncc"]

[tool.pytest.ini_options]
addopts = "-ra"
