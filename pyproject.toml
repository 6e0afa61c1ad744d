[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftprint"
version = "0.1.0"
description = "A small printf-style formatter with C-flavoured character, memory, string, list and output helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "formatting", "strings", "bytes", "linked-list", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ftprint"]

[tool.pytest.ini_options]
addopts = "-ra"
