[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glscenes"
version = "0.1.0"
description = "Scene logic for small 3D graphics demos: transforms, a look-at camera, a trackball, OBJ models, polygons, a starfield and a model viewer"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "graphics",
    "3d",
    "camera",
    "trackball",
    "wavefront-obj",
    "starfield",
    "matrices",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["glscenes"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
