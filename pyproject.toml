[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "huffzip"
version = "0.1.0"
description = "Huffman-coding file compressor with optional password scrambling"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "compression", "archive", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
huffzip = "huffzip.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["huffzip"]

[tool.pytest.ini_options]
addopts = "-ra"
