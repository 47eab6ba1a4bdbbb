[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spriteforge"
version = "1.0.0"
description = "A small component-based 2D game engine with XML scenes, input actions and sprite-sheet animation graphs."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "component", "sprite", "animation", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spriteforge = "spriteforge.game:main"

[tool.hatch.build.targets.wheel]
packages = ["spriteforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
