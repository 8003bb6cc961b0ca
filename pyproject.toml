[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wndframe"
version = "0.1.0"
description = "Core pieces of a windowed application framework: events, mouse input, input codes, logging and an IoC container."
requires-python = ">=3.10"
dependencies = []
keywords = ["framework", "events", "input", "mouse", "ioc", "logging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wndframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
