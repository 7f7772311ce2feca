[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arenarpg"
version = "0.1.0"
description = "Warriors, mages and their weapons in a small turn-based arena combat game"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "game", "combat", "arena", "turn-based", "characters", "weapons"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arenarpg-demo = "arenarpg.demo:main"
arenarpg-generador = "arenarpg.generador:main"
arenarpg-juego = "arenarpg.juego:main"

[tool.hatch.build.targets.wheel]
packages = ["arenarpg"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
