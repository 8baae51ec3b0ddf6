[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chesskit"
version = "1.0.0"
description = "Chess building blocks: squares, pieces, castling rights, UCI moves and piece placements, with parsing, formatting and pseudo-legal move generation."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "fen", "uci", "move generation", "parsing", "formatting"]
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
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chesskit"]

[tool.pytest.ini_options]
addopts = "-ra"
