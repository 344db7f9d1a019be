[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crawlkit"
version = "0.1.0"
description = "Building blocks for a web crawler: module IDs, a load-balancing registrar, a downloader, an analyzer and an item pipeline."
requires-python = ">=3.10"
dependencies = []
keywords = ["crawler", "spider", "web", "scraping", "pipeline"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["crawlkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
