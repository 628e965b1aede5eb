[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtseries"
version = "0.1.0"
description = "Building blocks for a recursive Monte Carlo ray tracer: vectors, rays, cameras, PDFs and materials."
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "path tracing", "rendering", "graphics", "monte carlo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rtseries"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
