[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "garment_tracker"
version = "0.1.0"
description = "Threaded pipeline that segments, tracks and displays garments from a looping image sequence"
requires-python = ">=3.10"
keywords = ["tracking", "segmentation", "computer-vision", "pipeline"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Recognition",
]
dependencies = [
    "numpy",
    "pillow",
    "scipy",
    "matplotlib",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
garment-tracker = "garment_tracker.main:main"

[tool.hatch.build.targets.wheel]
packages = ["garment_tracker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
