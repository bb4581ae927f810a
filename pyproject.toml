[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shootinggame"
version = "0.1.0"
description = "A small arcade shooting game skeleton with a fixed-rate frame timer, built on pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "shooter", "arcade", "pygame", "frame-timer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shootinggame = "shootinggame.main:main"

[tool.hatch.build.targets.wheel]
packages = ["shootinggame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
