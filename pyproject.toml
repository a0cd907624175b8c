[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kalkulator"
version = "0.1.0"
description = "A calculator with a memory slot and a number-base converter for bases 2 to 10"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "number base", "radix", "conversion", "arithmetic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
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
kalkulator = "kalkulator.app:main"

[tool.hatch.build.targets.wheel]
packages = ["kalkulator"]

[tool.pytest.ini_options]
addopts = "-ra"
