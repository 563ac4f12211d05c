[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xiangqiboard"
version = "0.1.0"
description = "A Chinese chess (xiangqi) board model with move rules, check detection, game records and a terminal front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["xiangqi", "chinese chess", "board game", "chess rules"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xiangqiboard = "xiangqiboard.app:main"

[tool.hatch.build.targets.wheel]
packages = ["xiangqiboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
