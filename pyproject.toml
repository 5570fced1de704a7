[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planekit"
version = "0.1.0"
description = "2D geometry primitives: vectors, points, sizes, rectangles, rounded rectangles, quadratic Bézier curves and splines, and scale-plus-translate transforms."
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "2d", "bezier", "curves", "graphics", "vector", "rectangle"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["planekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 99
target-version = "py310"
