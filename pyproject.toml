[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "forestplot"
version = "0.1.0"
description = "Geometry generation for 2D and 3D mathematical plots: curves, implicit contours, surfaces, tubes and a camera."
requires-python = ">=3.10"
dependencies = []
keywords = ["plotting", "geometry", "marching cubes", "implicit curves", "parametric surfaces", "mesh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["forestplot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
