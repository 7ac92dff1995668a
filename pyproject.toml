[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snowdefense"
version = "1.0.0"
description = "A terminal tower-defence game: place polar defenders and stop the skiers before they reach the crown."
requires-python = ">=3.10"
keywords = ["game", "tower-defense", "terminal", "strategy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snowdefense = "snowdefense.game:main"

[tool.hatch.build.targets.wheel]
packages = ["snowdefense"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
