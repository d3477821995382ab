[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "rallykit"
version = "0.6.7"
description = "Rally game core: codriver pace notes, vehicle controls and engine state, weather and checkpoint geometry, HUD rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["rally", "racing", "game", "codriver", "simulation", "hud"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["rallykit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
