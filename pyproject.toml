[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edgenet"
version = "0.1.0"
description = "Edge detection on thresholded images with classic operators, a trainable perceptron and a small fixed neural network"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "edge detection",
    "image processing",
    "perceptron",
    "neural network",
    "sobel",
    "prewitt",
    "roberts",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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
]

[project.scripts]
edgenet-detect = "edgenet.cli:edge_main"
edgenet-train = "edgenet.cli:train_main"

[tool.hatch.build.targets.wheel]
packages = ["edgenet"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
