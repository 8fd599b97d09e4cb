[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fotonray"
version = "0.1.0"
description = "Photon mapping building blocks: vectors, colours, transformations, rays, textures, sampling, density kernels and tone mapping"
requires-python = ">=3.10"
dependencies = []
keywords = ["photon mapping", "ray tracing", "rendering", "graphics", "tone mapping", "ppm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fotonray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
