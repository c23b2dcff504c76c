[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wasmforge"
version = "0.19.0"
description = "Building blocks for representing and encoding the parts of WebAssembly modules"
requires-python = ">=3.10"
dependencies = []
keywords = ["wasm", "webassembly", "binary", "leb128", "arena"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wasmforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
