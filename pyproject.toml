[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortcollection"
version = "1.0.0"
description = "An interactive collection of classic, esoteric and distribution sorting algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "algorithms", "education", "quicksort", "heapsort", "bogosort"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
sortcollection = "sortcollection.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sortcollection"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
