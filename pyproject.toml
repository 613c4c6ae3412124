[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ferrolings"
version = "0.1.0"
description = "Compile, run, verify and watch a course of small exercises from the terminal, with worked lessons on everyday programming concepts"
requires-python = ">=3.11"
keywords = ["exercises", "learning", "teaching", "compiler", "watch", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = [
    "rich",
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ferrolings = "ferrolings.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ferrolings"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
