"""Per-frame collection of drawable objects and lights."""

from __future__ import annotations

import numpy as np

from realmengine.camera import Frustum
from realmengine.lights import AmbientLight, DirectionalLight, PointLight, SpotLight
from realmengine.render_object import RenderObject


class RenderScene:
    """Opaque and transparent objects plus the lights that illuminate them."""

    def __init__(self) -> None:
        self.opaque_objects: list[RenderObject] = []
        self.transparent_objects: list[RenderObject] = []
        self.directional_lights: list[DirectionalLight] = []
        self.point_lights: list[PointLight] = []
        self.spot_lights: list[SpotLight] = []
        self.ambient_light = AmbientLight()

    def add_render_object(self, obj: RenderObject) -> None:
        """Add an object to the opaque set."""
        self.opaque_objects.append(obj)

    def clear_render_objects(self) -> None:
        """Remove all opaque and transparent objects."""
        self.opaque_objects.clear()
        self.transparent_objects.clear()

    def sort_transparent_objects(self, camera_pos) -> None:
        """Order transparent objects from farthest to nearest the camera."""
        camera = np.array(camera_pos, dtype=float).reshape(3)
        self.transparent_objects.sort(
            key=lambda obj: float(np.linalg.norm(obj.world_bounds.center() - camera)),
            reverse=True,
        )

    def cull_objects(self, frustum: Frustum) -> None:
        """Keep only visible opaque objects whose bounds touch the frustum."""
        self.opaque_objects = [
            obj
            for obj in self.opaque_objects
            if obj.visible and frustum.contains_aabb(obj.world_bounds)
        ]

    def add_directional_light(self, light: DirectionalLight) -> None:
        self.directional_lights.append(light)

    def add_point_light(self, light: PointLight) -> None:
        self.point_lights.append(light)

    def add_spot_light(self, light: SpotLight) -> None:
        self.spot_lights.append(light)

    def clear_lights(self) -> None:
        """Remove directional, point and spot lights; the ambient light stays."""
        self.directional_lights.clear()
        self.point_lights.clear()
        self.spot_lights.clear()

    def __repr__(self) -> str:
        return (
            f"RenderScene(opaque={len(self.opaque_objects)}, "
            f"transparent={len(self.transparent_objects)}, "
            f"lights={len(self.directional_lights) + len(self.point_lights) + len(self.spot_lights)})"
        )