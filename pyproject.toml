[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "specup"
version = "0.1.0"
description = "Spectral upsampling of RGB colours and images, with spectrum, ENVI header and colour math utilities"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "spectral",
    "upsampling",
    "rgb",
    "spectrum",
    "colour",
    "envi",
    "hyperspectral",
    "smits",
    "mese",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["specup"]

[tool.hatch.build.targets.sdist]
include = [
    "specup",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
