[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blobtext"
version = "0.1.0"
description = "Hold text as a doubly linked chain of blobs that can be split, joined and printed"
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "blob", "linked list", "chunking", "text processing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blobtext = "blobtext.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["blobtext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
