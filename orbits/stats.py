"""
Physical statistics of stars and planets.

A body of scale ``s`` is the reference body (the Sun for stars, the Earth for planets)
with every length multiplied by ``s`` and a constant density, so mass grows with ``s**3``.
"""

import math
from dataclasses import dataclass
from typing import Union

import astropy.units as u
import numpy as np
from astropy.units import Quantity
from numpy.typing import ArrayLike

from orbits.constants import (
    EARTH_GRAVITY,
    EARTH_MASS,
    EARTH_RADIUS,
    GRAVITATIONAL_CONSTANT,
    SUN_MASS,
    SUN_RADIUS,
)
from orbits.system import BodyKind, Planet, Star

GRAVITY_UNIT = u.m / u.s**2

Ratio = Union[float, np.ndarray]


class InvalidScaleError(ValueError):
    pass


def surface_gravity(mass: Quantity, radius: Quantity) -> Quantity:
    return (GRAVITATIONAL_CONSTANT * mass / radius**2).to(GRAVITY_UNIT)


@dataclass(frozen=True)
class ReferenceBody:
    name: str
    radius: Quantity
    mass: Quantity
    gravity: Quantity

    @property
    def circumference(self) -> Quantity:
        return 2 * math.pi * self.radius


SUN = ReferenceBody(name="Sun", radius=SUN_RADIUS, mass=SUN_MASS, gravity=surface_gravity(SUN_MASS, SUN_RADIUS))
# Planets compare against the nominal 9.81 m/s^2, not the gravity computed from the Earth constants
EARTH = ReferenceBody(name="Earth", radius=EARTH_RADIUS, mass=EARTH_MASS, gravity=EARTH_GRAVITY)

_REFERENCES = {
    BodyKind.STAR: SUN,
    BodyKind.PLANET: EARTH,
}


@dataclass(frozen=True)
class BodyStats:
    kind: BodyKind
    scale: Ratio
    reference: ReferenceBody
    radius: Quantity
    circumference: Quantity
    mass: Quantity
    gravity: Quantity
    radius_ratio: Ratio
    circumference_ratio: Ratio
    mass_ratio: Ratio
    gravity_ratio: Ratio

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        if np.ndim(self.scale) != 0:
            return f"{self.kind.value.capitalize()} stats for {np.size(self.scale)} scales"

        ref = self.reference.name
        return "\n".join(
            [
                f"{self.kind.value.capitalize()} (size={self.scale})",
                f"Radius (m): {_format_number(self.radius.to_value(u.m))} "
                f"(~{_format_number(self.radius_ratio)}x {ref})",
                f"Circumference (m): {_format_number(self.circumference.to_value(u.m))} "
                f"(~{_format_number(self.circumference_ratio)}x {ref})",
                f"Mass (kg): {_format_number(self.mass.to_value(u.kg))} (~{_format_number(self.mass_ratio)}x {ref})",
                f"Surface Gravity (m/s^2): {_format_number(self.gravity.to_value(GRAVITY_UNIT))} "
                f"(~{_format_number(self.gravity_ratio)}x {ref})",
            ]
        )


def _format_number(value: float) -> str:
    """Thousands separators and at most two fraction digits."""
    text = f"{float(value):,.2f}"
    return text.rstrip("0").rstrip(".")


def _validate_scale(scale: ArrayLike) -> Ratio:
    try:
        values = np.asarray(scale, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidScaleError(f"Scale must be a number, got {scale!r}") from e

    if values.size == 0 or not np.all(np.isfinite(values) & (values > 0)):
        raise InvalidScaleError(f"Scale must be positive and finite, got {scale!r}")
    return values if values.ndim else float(values)


def _reference_for(kind: Union[str, BodyKind]) -> tuple[BodyKind, ReferenceBody]:
    body_kind = BodyKind(kind)
    if body_kind not in _REFERENCES:
        raise ValueError(f"Statistics are only available for stars and planets, got '{body_kind.value}'")
    return body_kind, _REFERENCES[body_kind]


def compute_stats(kind: Union[str, BodyKind], scale: ArrayLike) -> BodyStats:
    """
    Computes radius, circumference, mass and surface gravity of a body.

    Args:
        kind: "star" (relative to the Sun) or "planet" (relative to the Earth).
        scale: Size relative to the reference body. Either a number or an array of numbers.

    Raises:
        InvalidScaleError: If any scale is not strictly positive and finite, or so extreme that
            a derived quantity can not be represented as a positive finite number.
        ValueError: If ``kind`` is neither a star nor a planet.
    """
    body_kind, reference = _reference_for(kind)
    scale = _validate_scale(scale)

    try:
        with np.errstate(over="ignore", under="ignore", invalid="ignore"):
            stats = _scaled_stats(body_kind, reference, scale)
    except OverflowError as e:
        raise InvalidScaleError(f"Scale {scale!r} is out of the representable range") from e

    _check_representable(stats)
    return stats


def _scaled_stats(body_kind: BodyKind, reference: ReferenceBody, scale: Ratio) -> BodyStats:
    radius = reference.radius * scale
    mass = reference.mass * scale**3
    circumference = 2 * math.pi * radius
    # g = G * M / R^2 grows linearly with the scale
    gravity = surface_gravity(reference.mass, reference.radius) * scale

    return BodyStats(
        kind=body_kind,
        scale=scale,
        reference=reference,
        radius=radius,
        circumference=circumference,
        mass=mass,
        gravity=gravity,
        radius_ratio=_ratio(radius, reference.radius),
        circumference_ratio=_ratio(circumference, reference.circumference),
        mass_ratio=_ratio(mass, reference.mass),
        gravity_ratio=_ratio(gravity, reference.gravity),
    )


def _check_representable(stats: BodyStats):
    values = [
        stats.radius.value,
        stats.circumference.value,
        stats.mass.value,
        stats.gravity.value,
        stats.radius_ratio,
        stats.circumference_ratio,
        stats.mass_ratio,
        stats.gravity_ratio,
    ]
    for value in values:
        value = np.asarray(value, dtype=float)
        if not np.all(np.isfinite(value) & (value > 0)):
            raise InvalidScaleError(f"Scale {stats.scale!r} is out of the representable range")


def _ratio(value: Quantity, reference: Quantity) -> Ratio:
    ratio = (value / reference).to_value(u.dimensionless_unscaled)
    return ratio if np.ndim(ratio) else float(ratio)


def stats_for(body: Union[Star, Planet]) -> BodyStats:
    if isinstance(body, Star):
        return compute_stats(BodyKind.STAR, body.scale)
    if isinstance(body, Planet):
        return compute_stats(BodyKind.PLANET, body.scale)
    raise ValueError(f"Statistics are only available for stars and planets, got {type(body).__name__}")
