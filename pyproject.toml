[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smogshooter"
version = "0.1.0"
description = "A top-down arcade shooter whose difficulty follows a PM2.5 air-quality reading"
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "shooter", "air quality", "pm2.5"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
smogshooter = "smogshooter.game:main"

[tool.hatch.build.targets.wheel]
packages = ["smogshooter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
