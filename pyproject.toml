[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datahash"
version = "0.1.0"
description = "Hash length-prefixed byte records, serially or across threads, plus a scope timer and small Julia-set and iota utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "records", "threads", "timing", "julia-set", "ppm"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
datahash-hash = "datahash.hashing:main"
datahash-parallel = "datahash.parallel:main"
datahash-julia = "datahash.julia:main"
datahash-iota = "datahash.iota:main"

[tool.hatch.build.targets.wheel]
packages = ["datahash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
