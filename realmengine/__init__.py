"""Bounding boxes, lights, materials, meshes, models, camera, render scene and swap buffer for a small 3D renderer."""

__version__ = "0.1.0"