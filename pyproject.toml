[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphseg"
version = "0.1.0"
description = "Graph-based image segmentation: Felzenszwalb-Huttenlocher merging and seeded image foresting transform"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = [
    "image segmentation",
    "felzenszwalb",
    "image foresting transform",
    "ift",
    "disjoint set",
    "computer vision",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
    "pillow",
]

[project.scripts]
graphseg = "graphseg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphseg"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
