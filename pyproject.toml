[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dxball"
version = "1.0.0"
description = "The start of an arcade game: a resizable window that shows centred text rendered from fonts found in asset folders."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "dx-ball", "breakout", "pygame"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dxball = "dxball.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dxball"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
