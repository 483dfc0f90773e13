[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "righthook"
version = "0.1.0"
description = "A Git hooks manager driven by a YAML configuration file"
requires-python = ">=3.10"
keywords = ["git", "hooks", "pre-commit", "pre-push", "automation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]
dependencies = [
    "pyyaml",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
righthook = "righthook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["righthook"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
