[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "succinctree"
version = "0.1.0"
description = "Range minimum queries and balanced-parentheses vectors with min-max tree excess search."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "succinct",
    "rmq",
    "range-minimum-query",
    "balanced-parentheses",
    "min-max-tree",
    "rank-select",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["succinctree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
