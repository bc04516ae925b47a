[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelstrip"
version = "0.1.0"
description = "Pixel buffers, colour orderings, matrix layouts and wire framing for addressable LED strips"
requires-python = ">=3.10"
dependencies = []
keywords = ["led", "neopixel", "dotstar", "apa102", "lpd8806", "lpd6803", "pixels"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pixelstrip"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
