[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "relevo"
version = "0.1.0"
description = "Generate fractal terrain with the diamond-square algorithm and render it as a shaded PPM image."
requires-python = ">=3.10"
dependencies = []
keywords = ["terrain", "diamond-square", "fractal", "heightmap", "ppm", "procedural"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
relevo = "relevo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["relevo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
