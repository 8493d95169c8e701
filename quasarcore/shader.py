"""Descriptions of a shader program's stages, by file or by source text."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ShaderFile", "ShaderSource"]


@dataclass
class ShaderFile:
    """Paths of the shader stage files; empty when a stage is unused."""

    vertex_shader_file: str = ""
    fragment_shader_file: str = ""
    geometry_shader_file: str = ""
    compute_shader_file: str = ""
    tess_control_shader_file: str = ""
    tess_evaluation_shader_file: str = ""


@dataclass
class ShaderSource:
    """Source text of the shader stages; empty when a stage is unused."""

    vertex_shader_source: str = ""
    fragment_shader_source: str = ""
    geometry_shader_source: str = ""
    compute_shader_source: str = ""
    tess_control_shader_source: str = ""
    tess_evaluation_shader_source: str = ""