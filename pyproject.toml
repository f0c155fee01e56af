[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labworks"
version = "1.0.0"
description = "Small programs and data structures: palindromes, base-4 numbers, polygons, containers and an NPC battle simulation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "palindrome",
    "quaternary",
    "geometry",
    "polygon",
    "dynamic-array",
    "linked-list",
    "memory-pool",
    "observer",
    "visitor",
    "simulation",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labworks-palindrome = "labworks.palindrome:main"
labworks-quaternary = "labworks.quaternary:main"
labworks-figures = "labworks.figures_cli:main"
labworks-pooled-list = "labworks.pooled_list:main"
labworks-arena = "labworks.arena:main"
labworks-battle = "labworks.battle:main"

[tool.hatch.build.targets.wheel]
packages = ["labworks"]

[tool.hatch.build.targets.sdist]
include = ["labworks", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
