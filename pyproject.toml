[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bubblegum"
version = "0.1.0"
description = "A boss-battle arcade game: dodge thrown food, shoot bubblegum back and beat three bosses in a row."
requires-python = ">=3.10"
keywords = ["game", "arcade", "boss-rush", "pygame", "shooter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
bubblegum = "bubblegum.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bubblegum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
