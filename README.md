# realmengine

This package holds the data side of a small real-time 3D renderer. It
covers bounding boxes, lights, PBR materials, meshes, scene-graph nodes,
models, a camera, a render scene, and a double-buffered hand-off of
render data from game logic to the renderer. The camera builds view and
projection matrices and the view frustum and culls against it.

Vectors and matrices are `numpy` arrays of floats. Matrices are indexed
`m[row, column]` and act on column vectors. A translation therefore sits
in `m[:3, 3]`, and transforms combine as `projection @ view`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `realmengine.geometry`: `AABB(min, max)` with `center()` and `extent()`.
- `realmengine.logger`: `LogLevel`, `Logger` and the helpers `info`,
  `debug`, `warn`, `err` and `fatal`. `Logger.log(level, message)` writes
  to the standard `logging` logger of the same name. The default name is
  `muggle_logger`.
  - `Logger.initialize()` attaches a console handler that writes to
    stdout in the form `[info] message`.
  - `Logger.disposal()` detaches the handler again.
  - The helpers log through the `muggle_logger` logger. Each one puts a
    tag such as `[info]` in front of the message. Nothing reaches the
    console until a `Logger()` has been initialized.
  - A message at `LogLevel.FATAL` is logged at critical level and then
    raised as `RuntimeError`. This applies to `fatal()` as well.
- `realmengine.lights`: `DirectionalLight`, `PointLight`, `SpotLight` and
  `AmbientLight`, as dataclasses.
  - Directions are normalized on construction.
  - `SpotLight.set_cutoff_angles(inner_degrees, outer_degrees)` stores
    the cosines of the two angles.
- `realmengine.material`: `TextureRef`, `RenderState` with the enums
  `BlendMode`, `CullMode` and `DepthTest`, and `Material`.
  - `Material` holds five optional textures, the PBR factors and a
    render state.
  - `set_base_color_texture` and `set_emissive_texture` use slots 0 and 4,
    both as sRGB.
  - `set_metallic_roughness_texture`, `set_normal_texture` and
    `set_occlusion_texture` use slots 1, 2 and 3, all as linear.
- `realmengine.node`: `Node`, a scene-graph node with a local transform,
  mesh indices, a parent and children.
  - `add_child` sets the child's parent. `add_child(None)` does nothing.
  - `world_transform()` multiplies the parents' transforms onto the
    local transform.
- `realmengine.mesh`: `Vertex`, `SubMesh` and `Mesh`.
  - `Mesh` offers `calculate_normals()`, `calculate_tangents()` (with
    Gram-Schmidt orthogonalization against the normal) and
    `calculate_aabb()`, which updates `mesh.bounds`.
  - `is_valid()` checks the index range, whole triangles and the
    sub-mesh ranges. `clear()` empties the mesh.
  - Setting `vertices` or `indices` marks the mesh as `gpu_data_dirty`.
    `mark_gpu_data_synced()` clears that flag.
- `realmengine.model`: `Model`, which holds a `root` node, `meshes` and
  `materials`.
  - `get_mesh` and `get_material` raise `IndexError` when the index is
    out of range. `try_get_mesh` and `try_get_material` return `None`
    instead.
  - `calculate_aabb()` encloses the stored bounds of all meshes.
- `realmengine.render_object`: `RenderObject`, which holds mesh and
  material indices, world bounds, and the flags `cast_shadows`,
  `receive_shadows`, `visible` and `layer`. Setting `model_matrix` also
  updates `normal_matrix`, the inverse transpose.
- `realmengine.camera`: `Frustum`, `ProjectionType` and `RenderCamera`.
  - `Frustum` offers `contains_point`, `contains_sphere` and
    `contains_aabb`.
  - `RenderCamera` sets its pose with `set_position`, `set_rotation` (a
    quaternion `w, x, y, z`), `set_rotation_euler` (pitch, yaw and roll
    in degrees) and `look_at`.
  - Its projection comes from `set_perspective` (vertical fov in
    degrees) or `set_orthographic`.
  - `view_matrix()` and `proj_matrix()` rebuild their matrix on demand.
  - `view_proj_matrix` and `frustum` are refreshed only by `update()`.
- `realmengine.render_scene`: `RenderScene`, which holds opaque and
  transparent objects, directional, point and spot lights, and an
  ambient light.
  - `sort_transparent_objects(camera_pos)` orders the transparent objects
    from farthest to nearest.
  - `cull_objects(frustum)` keeps only the visible opaque objects whose
    bounds touch the frustum.
- `realmengine.swap_buffer`: `RenderSwapBuffer` with `logic_data` and
  `render_data`, both of type `RenderSwapData`.
  - `swap_data()` clears the render side and exchanges the two, but only
    when `is_ready_to_swap()` is true.
  - The payload types are `CameraRes`, `RenderObjectRes`, `ObjectRes`,
    `ObjectsQueue` and `LightingRes`.
  - `LightingRes` raises `ValueError` when it gets more than 4
    directional, 32 point or 16 spot lights.
- `realmengine.render_material`: `RenderMaterial`.
  - `sync(rhi, material, shader_program)` copies the material's factors
    and render state and loads each texture with `rhi.load_texture(path)`.
  - `disposal(rhi)` releases the textures with `rhi.delete_texture`.
  - `textures()` lists the handles that are loaded.
- `realmengine.render_resource`: `RenderResource`, which stores render
  meshes and render materials by index. Its getters return `None` for
  unknown indices.

## Example

```python
import numpy as np

from realmengine.camera import RenderCamera
from realmengine.geometry import AABB
from realmengine.render_object import RenderObject
from realmengine.render_scene import RenderScene

camera = RenderCamera()
camera.set_position(np.array([0.0, 0.0, 5.0]))
camera.set_perspective(45.0, 16 / 9, 0.1, 100.0)
camera.update()

scene = RenderScene()
obj = RenderObject()
obj.world_bounds = AABB(np.array([-1.0, -1.0, -1.0]), np.array([1.0, 1.0, 1.0]))
scene.add_render_object(obj)
scene.cull_objects(camera.frustum)
print(len(scene.opaque_objects))  # 1
```

## What it does not do

The package has no window, input handling or main loop, and it issues no
graphics API calls. It compiles no shaders and draws nothing. It does not
read model or image files either.

- Texture loading is left to the object passed to `RenderMaterial.sync`
  and `RenderMaterial.disposal`. That object must provide
  `load_texture(path)` and `delete_texture(handle)`.
- `RenderResource` stores render meshes as whatever objects it is given.
- `RenderResource.update` does nothing.