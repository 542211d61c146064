[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubkit"
version = "0.1.0"
description = "Small text, line-reading, image-buffer and XPM utilities for raycasting projects"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "linked-list", "line-reader", "xpm", "image", "colors"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
