[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zerozen"
version = "1.0.0"
description = "A small dense neural network library built on a pure-Python matrix type"
requires-python = ">=3.10"
keywords = ["neural network", "machine learning", "backpropagation", "matrix", "sgd"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zerozen-upscale = "zerozen.upscale:main"
zerozen-xor = "zerozen.xor:main"

[tool.hatch.build.targets.wheel]
packages = ["zerozen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
