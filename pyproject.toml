[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datakota"
version = "0.1.0"
description = "Interactive terminal register of cities and their residents"
requires-python = ">=3.10"
dependencies = []
keywords = ["cities", "residents", "registry", "terminal", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
datakota = "datakota.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["datakota"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
