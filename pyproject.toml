[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pagingsim"
version = "0.1.0"
description = "Paged virtual memory simulator with one-level, two-level and inverted page tables and FIFO frame replacement"
requires-python = ">=3.10"
dependencies = []
keywords = ["paging", "virtual memory", "page table", "simulator", "operating systems", "fifo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pagingsim = "pagingsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pagingsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
