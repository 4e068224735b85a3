[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brakecalc"
version = "0.1.0"
description = "Stopping-distance and braking-decision calculations in SI units, with small interactive tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["braking", "stopping distance", "reaction distance", "kinematics", "safety"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
brake-cli = "brakecalc.cli:main"
brake-safety = "brakecalc.safety:main"
brake-math = "brakecalc.mathutils:main"
brake-calculator = "brakecalc.calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["brakecalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
