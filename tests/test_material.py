import pytest

from quasarcore.material import Material, MaterialSpecification, TextureType, create_material


@pytest.mark.parametrize("slot", list(TextureType))
def test_set_has_reset(slot):
    material = Material(MaterialSpecification())
    assert not material.has_texture(slot)
    assert material.texture_path(slot) is None
    material.set_texture(slot, "textures/brick.png")
    assert material.has_texture(slot)
    assert material.texture_path(slot) == "textures/brick.png"
    material.reset_texture(slot)
    assert not material.has_texture(slot)


def test_slots_are_independent():
    material = Material(MaterialSpecification())
    material.set_texture(TextureType.NORMAL, "n.png")
    others = [slot for slot in TextureType if slot is not TextureType.NORMAL]
    assert not any(material.has_texture(slot) for slot in others)
    assert material.specification.normal_texture == "n.png"


def test_specification_fields_map_to_slots():
    spec = MaterialSpecification(albedo_texture="a.png", ao_texture="ao.png")
    material = Material(spec)
    assert material.texture_path(TextureType.ALBEDO) == "a.png"
    assert material.texture_path(TextureType.AO) == "ao.png"
    assert not material.has_texture(TextureType.ROUGHNESS)


def test_material_copies_specification():
    spec = MaterialSpecification(metallic=0.9)
    material = Material(spec)
    spec.metallic = 0.1
    spec.albedo_texture = "late.png"
    assert material.specification.metallic == 0.9
    assert not material.has_texture(TextureType.ALBEDO)


def test_default_values():
    material = Material()
    assert material.specification.albedo == (1.0, 1.0, 1.0)
    assert material.specification.metallic == 0.5
    assert material.specification.roughness == 0.5
    assert material.specification.ao == 1.0


def test_create_material():
    spec = MaterialSpecification(roughness=0.25, metallic_texture="m.png")
    material = create_material(spec)
    assert isinstance(material, Material)
    assert material.specification == spec
    assert material.specification is not spec