[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shopdesk"
version = "0.1.0"
description = "A small console shop: a product catalog kept in a text file, with admin and buyer menus."
requires-python = ">=3.10"
dependencies = []
keywords = ["shop", "catalog", "point-of-sale", "console", "cart"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shopdesk = "shopdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shopdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
