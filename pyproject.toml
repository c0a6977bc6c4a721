[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cgl"
version = "0.1.0"
description = "Small computer-graphics toolkit: vectors, matrices, quaternions, colours, base64 and on-screen text bookkeeping"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "vector", "matrix", "quaternion", "color", "linear-algebra", "base64"]
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
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["cgl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
