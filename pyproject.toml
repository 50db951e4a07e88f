[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmpgray"
version = "0.1.0"
description = "Convert uncompressed 24/32-bit BMP images to grayscale, with a small pairwise-sum timing demo"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "bitmap", "grayscale", "image", "luminance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bmpgray-grayscale = "bmpgray.grayscale:main"
bmpgray-pairsum = "bmpgray.pairsum:main"

[tool.hatch.build.targets.wheel]
packages = ["bmpgray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
