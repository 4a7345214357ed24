[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "realmengine"
version = "0.1.0"
description = "Scene, model, camera and render-data structures for a small real-time 3D renderer"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["3d", "rendering", "camera", "frustum", "mesh", "pbr", "scene-graph"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["realmengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
