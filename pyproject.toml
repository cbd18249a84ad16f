[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "huffzip"
version = "0.1.0"
description = "Compress and decompress files with static Huffman coding"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "compression", "entropy-coding", "bits"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
test = ["pytest", "hypothesis"]

[project.scripts]
huffzip = "huffzip.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["huffzip"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
