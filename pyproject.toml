[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pngpong"
version = "0.1.0"
description = "Hide and retrieve messages in PNG files by adding custom chunks"
requires-python = ">=3.10"
keywords = ["png", "steganography", "chunk", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pngpong = "pngpong.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pngpong"]

[tool.pytest.ini_options]
addopts = "-ra"
