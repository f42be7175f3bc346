[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ulaznice"
version = "1.0.0"
description = "Interactive console ticket register and shopping basket for concert and football events"
requires-python = ">=3.10"
dependencies = []
keywords = ["tickets", "events", "basket", "console", "point-of-sale"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Croatian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ulaznice = "ulaznice.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ulaznice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
