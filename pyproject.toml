[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weeninja"
version = "0.1.0"
description = "A fruit-slicing arcade game played with the mouse"
requires-python = ">=3.10"
keywords = ["game", "arcade", "fruit", "pygame", "slicing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
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
weeninja = "weeninja.app:main"

[tool.hatch.build.targets.wheel]
packages = ["weeninja"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
