[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deflatekit"
version = "0.1.0"
description = "Checksums and Lempel-Ziv matchfinding building blocks for DEFLATE-family compressors"
requires-python = ">=3.10"
dependencies = []
keywords = ["deflate", "crc32", "adler32", "checksum", "lz77", "matchfinder", "compression"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["deflatekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
