[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlebox"
version = "0.1.0"
description = "Classic algorithm puzzles as small Python functions: stacks, sliding windows, backtracking, searching and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "puzzles",
    "backtracking",
    "sliding-window",
    "monotonic-stack",
    "binary-search",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["puzzlebox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
