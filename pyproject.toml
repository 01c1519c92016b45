[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "talon"
version = "0.1.0"
description = "A small 2D game engine core: scene graph, components, physics, sprite animation and editor logic."
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "2d", "components", "physics", "animation", "state-machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
talon = "talon.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["talon"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
