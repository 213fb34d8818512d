[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planegeom"
version = "0.1.0"
description = "Plane geometry primitives, a polygon with a current vertex and convex polygon intersection, with a small JSON HTTP service."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "geometry",
    "computational-geometry",
    "polygon",
    "clipping",
    "sutherland-hodgman",
    "convex",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
planegeom-server = "planegeom.server:main"

[tool.hatch.build.targets.wheel]
packages = ["planegeom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
