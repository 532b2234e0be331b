[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "despesas"
version = "0.1.0"
description = "Personal expense tracker for the terminal with binary file storage and a session action history"
requires-python = ">=3.10"
dependencies = []
keywords = ["expenses", "budget", "personal finance", "ledger", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
despesas = "despesas.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["despesas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
