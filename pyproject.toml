[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pengingat"
version = "0.1.0"
description = "A small command-line reminder book with a daily greeting that counts today's reminders"
requires-python = ">=3.10"
dependencies = []
keywords = ["reminder", "notes", "cli", "greeting", "schedule"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
reminder = "pengingat.cli:main"
greetings = "pengingat.greetings:main"

[tool.hatch.build.targets.wheel]
packages = ["pengingat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
