[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fmtprint"
version = "0.1.0"
description = "A printf-style formatter with exact decimal float rendering, plus C-style character, string and list helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "format", "sprintf", "string", "formatting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fmtprint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
