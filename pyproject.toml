[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpncalc"
version = "0.1.0"
description = "An interactive reverse polish notation calculator, with string and path helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpn", "calculator", "reverse-polish", "repl", "stack", "strings", "paths"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rpncalc = "rpncalc.repl:main"
rpncalc-proto = "rpncalc.protocalc:main"

[tool.hatch.build.targets.wheel]
packages = ["rpncalc"]

[tool.pytest.ini_options]
addopts = "-ra"
