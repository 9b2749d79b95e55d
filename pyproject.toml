[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "igscene"
version = "0.1.0"
description = "Scene utilities for a fixed-pipeline renderer: 4x4 transforms, ASCII PLY meshes, JPEG images, materials and light sources"
requires-python = ">=3.10"
keywords = ["graphics", "3d", "ply", "matrices", "materials", "lighting", "jpeg"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["igscene"]

[tool.pytest.ini_options]
addopts = "-ra"
