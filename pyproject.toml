[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "palabracalc"
version = "1.0.0"
description = "Console calculator for arithmetic written in Spanish number words, with XOR-obfuscated user accounts and an event log"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "spanish", "number words", "console", "arithmetic", "shunting-yard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
palabracalc = "palabracalc.controller:main"
palabracalc-classic = "palabracalc.classic:main"

[tool.hatch.build.targets.wheel]
packages = ["palabracalc"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
