"""Point lights, surface materials and Phong shading."""

from __future__ import annotations

from dataclasses import dataclass

from .tuple import Tuple, color


@dataclass
class Light:
    """A point light with a position and an intensity colour."""

    position: Tuple
    color: Tuple


@dataclass
class Material:
    """Phong material parameters; ``pattern`` selects a surface pattern."""

    color: Tuple
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    pattern: int = 0


def material_with_color(color: Tuple) -> Material:
    """Return a material of ``color`` with the default Phong parameters."""
    return Material(color=color)


def lighting(material: Material, light: Light, position: Tuple, eyev: Tuple,
             normalv: Tuple, in_shadow: bool) -> Tuple:
    """Shade a surface point with the Phong reflection model."""
    black = color(0, 0, 0)
    effective = material.color.hadamard(light.color)
    lightv = (light.position - position).normalize()
    light_dot_normal = lightv.dot(normalv)
    ambient = effective * material.ambient
    if light_dot_normal < 0:
        diffuse = black
        specular = black
    else:
        diffuse = effective * material.diffuse * light_dot_normal
        reflectv = (-lightv).reflect(normalv)
        reflect_dot_eye = reflectv.dot(eyev)
        if reflect_dot_eye <= 0:
            specular = black
        else:
            factor = reflect_dot_eye ** material.shininess
            specular = light.color * material.specular * factor
    if in_shadow:
        return ambient
    return ambient + diffuse + specular