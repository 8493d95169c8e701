"""Physically based materials: texture slots plus constant surface parameters."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

__all__ = ["TextureType", "MaterialSpecification", "Material", "create_material"]


class TextureType(Enum):
    """Texture slots of a material; the value names the specification field."""

    ALBEDO = "albedo_texture"
    NORMAL = "normal_texture"
    METALLIC = "metallic_texture"
    ROUGHNESS = "roughness_texture"
    AO = "ao_texture"


@dataclass
class MaterialSpecification:
    """Texture paths (``None`` when unset) and constant material values."""

    albedo_texture: Optional[str] = None
    normal_texture: Optional[str] = None
    metallic_texture: Optional[str] = None
    roughness_texture: Optional[str] = None
    ao_texture: Optional[str] = None

    albedo: tuple[float, float, float] = (1.0, 1.0, 1.0)

    metallic: float = 0.5
    roughness: float = 0.5
    ao: float = 1.0


class Material:
    """A material built from its own copy of a specification."""

    def __init__(self, specification: Optional[MaterialSpecification] = None) -> None:
        self.specification = replace(specification) if specification else MaterialSpecification()

    def __repr__(self) -> str:
        return f"Material({self.specification!r})"

    def set_texture(self, texture_type: TextureType, path: str) -> None:
        setattr(self.specification, texture_type.value, path)

    def texture_path(self, texture_type: TextureType) -> Optional[str]:
        """Path of the texture in the slot, or ``None`` if the slot is empty."""
        return getattr(self.specification, texture_type.value)

    def has_texture(self, texture_type: TextureType) -> bool:
        return self.texture_path(texture_type) is not None

    def reset_texture(self, texture_type: TextureType) -> None:
        setattr(self.specification, texture_type.value, None)


def create_material(specification: Optional[MaterialSpecification] = None) -> Material:
    return Material(specification)