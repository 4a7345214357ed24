"""Double-buffered hand-off of per-frame changes from game logic to the renderer."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

import numpy as np

from realmengine.lights import DirectionalLight, PointLight, SpotLight
from realmengine.logger import info

MAX_DIRECTIONAL_LIGHTS = 4
MAX_POINT_LIGHTS = 32
MAX_SPOT_LIGHTS = 16


def _identity() -> np.ndarray:
    return np.identity(4)


def _zeros3() -> np.ndarray:
    return np.zeros(3)


def _zeros4() -> np.ndarray:
    return np.zeros(4)


@dataclass(eq=False)
class CameraRes:
    """Camera matrices and position handed to the renderer."""

    view: np.ndarray = field(default_factory=_identity)
    projection: np.ndarray = field(default_factory=_identity)
    view_projection: np.ndarray = field(default_factory=_identity)
    camera_position: np.ndarray = field(default_factory=_zeros3)


@dataclass(eq=False)
class RenderObjectRes:
    """Transform and resource indices of one drawable."""

    model: np.ndarray = field(default_factory=_identity)
    normal_matrix: np.ndarray = field(default_factory=_identity)
    mesh: int = 0
    material: int = 0


@dataclass(eq=False)
class ObjectRes:
    """A group of drawables that changed together."""

    static_mesh: bool = True
    render_objects: list[RenderObjectRes] = field(default_factory=list)


@dataclass(eq=False)
class ObjectsQueue:
    """First-in, first-out queue of object changes."""

    objects: deque[ObjectRes] = field(default_factory=deque)

    def add(self, res: ObjectRes) -> None:
        """Append a change to the back of the queue."""
        self.objects.append(res)

    def pop(self) -> None:
        """Drop the change at the front; raise IndexError when empty."""
        if not self.objects:
            raise IndexError("pop from an empty objects queue")
        self.objects.popleft()

    def is_empty(self) -> bool:
        return not self.objects

    def next_object(self) -> ObjectRes:
        """Return the change at the front; raise IndexError when empty."""
        if not self.objects:
            raise IndexError("objects queue is empty")
        return self.objects[0]

    def __len__(self) -> int:
        return len(self.objects)


@dataclass(eq=False)
class LightingRes:
    """Scene lighting handed to the renderer, bounded by the shader's light limits."""

    ambient_color: np.ndarray = field(default_factory=_zeros4)
    dir_lights: list[DirectionalLight] = field(default_factory=list)
    point_lights: list[PointLight] = field(default_factory=list)
    spot_lights: list[SpotLight] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.ambient_color = np.array(self.ambient_color, dtype=float).reshape(4)
        self.dir_lights = list(self.dir_lights)
        self.point_lights = list(self.point_lights)
        self.spot_lights = list(self.spot_lights)
        for name, lights, limit in (
            ("directional", self.dir_lights, MAX_DIRECTIONAL_LIGHTS),
            ("point", self.point_lights, MAX_POINT_LIGHTS),
            ("spot", self.spot_lights, MAX_SPOT_LIGHTS),
        ):
            if len(lights) > limit:
                raise ValueError(f"at most {limit} {name} lights are supported, got {len(lights)}")

    @property
    def dir_light_count(self) -> int:
        return len(self.dir_lights)

    @property
    def point_light_count(self) -> int:
        return len(self.point_lights)

    @property
    def spot_light_count(self) -> int:
        return len(self.spot_lights)


@dataclass(eq=False)
class RenderSwapData:
    """Pending changes; a field left as None means nothing changed."""

    dirty_camera: CameraRes | None = None
    dirty_lighting: LightingRes | None = None
    dirty_objects: ObjectsQueue | None = None
    removed_objects: ObjectsQueue | None = None

    def add_dirty_object(self, res: ObjectRes) -> None:
        """Queue a changed object group, creating the queue if needed."""
        if self.dirty_objects is None:
            self.dirty_objects = ObjectsQueue()
        self.dirty_objects.add(res)

    def add_removed_object(self, res: ObjectRes) -> None:
        """Queue a removed object group, creating the queue if needed."""
        if self.removed_objects is None:
            self.removed_objects = ObjectsQueue()
        self.removed_objects.add(res)


class RenderSwapBuffer:
    """Pair of swap data sets: one written by logic, one read by the renderer."""

    def __init__(self) -> None:
        self.logic_data = RenderSwapData()
        self.render_data = RenderSwapData()

    def initialize(self) -> None:
        info("Render Swap Buffer initialized.")

    def dispose(self) -> None:
        info("Render Swap Buffer disposed all resources.")

    def is_ready_to_swap(self) -> bool:
        """Return whether the render side holds any pending change."""
        data = self.render_data
        return (
            data.dirty_camera is not None
            or data.dirty_lighting is not None
            or data.dirty_objects is not None
            or data.removed_objects is not None
        )

    def swap_data(self) -> None:
        """Clear the render side and exchange it with the logic side, if ready."""
        if not self.is_ready_to_swap():
            return
        self.reset_dirty_camera()
        self.reset_dirty_lighting()
        self.reset_dirty_objects()
        self.reset_removed_objects()
        self.logic_data, self.render_data = self.render_data, self.logic_data

    def reset_dirty_camera(self) -> None:
        self.render_data.dirty_camera = None

    def reset_dirty_lighting(self) -> None:
        self.render_data.dirty_lighting = None

    def reset_dirty_objects(self) -> None:
        self.render_data.dirty_objects = None

    def reset_removed_objects(self) -> None:
        self.render_data.removed_objects = None