[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crona"
version = "0.1.0"
description = "An experimental job scheduler driven by second-resolution cron expressions"
requires-python = ">=3.10"
dependencies = []
keywords = ["cron", "scheduler", "jobs", "crontab"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
crona = "crona.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["crona"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
