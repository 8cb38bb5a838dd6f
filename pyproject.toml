[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jyggalog"
version = "0.1.0"
description = "A simple, ordered logging library with levels, style bits and a fatal hook"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "logger", "log", "ansi", "colors"]
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
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jyggalog-demo = "jyggalog.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["jyggalog"]

[tool.pytest.ini_options]
addopts = "-ra"
