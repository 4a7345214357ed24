import numpy as np

from realmengine.material import BlendMode, Material, RenderState
from realmengine.render_material import RenderMaterial


class FakeRHI:
    def __init__(self):
        self.next_handle = 1
        self.loaded = {}
        self.deleted = []

    def load_texture(self, filepath):
        handle = self.next_handle
        self.next_handle += 1
        self.loaded[filepath] = handle
        return handle

    def delete_texture(self, handle):
        self.deleted.append(handle)


def make_material():
    material = Material()
    material.set_base_color_texture("albedo.png")
    material.set_normal_texture("normal.png")
    material.base_color_factor = np.array([0.5, 0.25, 1.0, 0.75])
    material.metallic_factor = 0.3
    material.roughness_factor = 0.6
    material.emissive_factor = np.array([0.1, 0.2, 0.3])
    material.render_state = RenderState(blend_mode=BlendMode.ALPHA_BLEND, depth_write=False)
    return material


def test_sync_loads_only_present_textures():
    rhi = FakeRHI()
    material = make_material()
    rm = RenderMaterial()
    rm.sync(rhi, material, 7)
    assert rm.shader_program == 7
    assert rm.base_color_texture == rhi.loaded["albedo.png"]
    assert rm.normal_texture == rhi.loaded["normal.png"]
    assert rm.metallic_roughness_texture is None
    assert rm.occlusion_texture is None
    assert rm.emissive_texture is None
    assert set(rhi.loaded) == {"albedo.png", "normal.png"}


def test_sync_copies_factors_and_state():
    rhi = FakeRHI()
    material = make_material()
    rm = RenderMaterial()
    rm.sync(rhi, material, 1)
    np.testing.assert_allclose(rm.base_color_factor, material.base_color_factor)
    np.testing.assert_allclose(rm.emissive_factor, material.emissive_factor)
    assert rm.metallic_factor == material.metallic_factor
    assert rm.roughness_factor == material.roughness_factor
    assert rm.render_state == material.render_state

    material.base_color_factor[0] = 0.0
    material.render_state.depth_write = True
    assert rm.base_color_factor[0] == 0.5
    assert rm.render_state.depth_write is False


def test_textures_lists_in_binding_order():
    rhi = FakeRHI()
    material = make_material()
    material.set_emissive_texture("glow.png")
    rm = RenderMaterial()
    rm.sync(rhi, material, 1)
    assert list(rm.textures()) == ["base_color_texture", "normal_texture", "emissive_texture"]


def test_sync_keeps_previous_handle_when_texture_missing():
    rhi = FakeRHI()
    rm = RenderMaterial()
    rm.sync(rhi, make_material(), 1)
    previous = rm.base_color_texture
    rm.sync(rhi, Material(), 2)
    assert rm.base_color_texture == previous
    assert rm.shader_program == 2


def test_disposal_deletes_and_clears():
    rhi = FakeRHI()
    rm = RenderMaterial()
    rm.sync(rhi, make_material(), 1)
    handles = sorted(rm.textures().values())
    rm.disposal(rhi)
    assert sorted(rhi.deleted) == handles
    assert rm.textures() == {}


def test_disposal_without_textures_deletes_nothing():
    rhi = FakeRHI()
    rm = RenderMaterial()
    rm.disposal(rhi)
    assert rhi.deleted == []


def test_defaults_match_material_defaults():
    rm = RenderMaterial()
    default = Material()
    np.testing.assert_allclose(rm.base_color_factor, default.base_color_factor)
    np.testing.assert_allclose(rm.emissive_factor, default.emissive_factor)
    assert rm.render_state == default.render_state