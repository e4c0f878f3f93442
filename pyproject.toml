[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "turbokit"
version = "5.1.0"
description = "Game runtime helpers: random numbers, keyboard text input, base64 encoding and program data types"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "random", "keyboard", "keycode", "base64"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["turbokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
