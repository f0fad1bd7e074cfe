import logging
from dataclasses import dataclass
from typing import Optional

from orbits.config import Palettes, resolve_palettes
from orbits.constants import (
    DEFAULT_LIGHT_INTENSITY,
    DEFAULT_PLANET_ORBIT_SPEED,
    FIRST_PLANET_ORBIT_RADIUS,
    PLANET_ORBIT_SPACING,
)
from orbits.random_stream import SeededRandomStream
from orbits.system import AuxiliaryKind, AuxiliaryObject, Moon, Planet, Star, SystemState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuxiliaryRule:
    scale: tuple[float, float]
    orbit_radius: tuple[int, int]
    orbit_speed: tuple[float, float]
    spin_speed: tuple[float, float]


# Iteration order is the draw order
AUXILIARY_RULES = {
    AuxiliaryKind.STATION: AuxiliaryRule(
        scale=(0.5, 2.0), orbit_radius=(5, 30), orbit_speed=(0.05, 0.15), spin_speed=(0.005, 0.02)
    ),
    AuxiliaryKind.WRECK: AuxiliaryRule(
        scale=(0.5, 1.5), orbit_radius=(5, 30), orbit_speed=(0.05, 0.15), spin_speed=(0.005, 0.02)
    ),
    AuxiliaryKind.UFO: AuxiliaryRule(
        scale=(0.3, 1.0), orbit_radius=(8, 23), orbit_speed=(0.05, 0.15), spin_speed=(0.01, 0.03)
    ),
}

STAR_SCALE = (0.5, 3.0)
PLANET_COUNT = (2, 6)
PLANET_SCALE = (0.5, 3.0)
PLANET_SPIN_SPEED = (0.005, 0.02)
MOON_COUNT = (0, 3)
MOON_SCALE = (0.1, 0.5)
MOON_ORBIT_RADIUS = (2, 6)
MOON_ORBIT_SPEED = (0.2, 0.6)
MOON_SPIN_SPEED = (0.01, 0.03)
AUXILIARY_COUNT = (0, 3)
STAR_ORBIT_PROBABILITY = 0.5


class SystemGenerator:
    """
    Builds a complete SystemState from a seeded stream.

    The order of the draws is part of the contract: the same seed must produce the same
    system on every implementation, so draws are never reordered, skipped or added.
    """

    def __init__(self, palettes: Optional[Palettes] = None):
        self._palettes = resolve_palettes(palettes)

    @property
    def palettes(self) -> Palettes:
        return self._palettes

    def generate(self, seed: str) -> SystemState:
        rng = SeededRandomStream.from_seed(seed)

        star = self._generate_star(rng)
        planet_count = rng.integer(*PLANET_COUNT)
        planets = [self._generate_planet(rng, i) for i in range(planet_count)]
        auxiliary = {}
        for kind, rule in AUXILIARY_RULES.items():
            count = rng.integer(*AUXILIARY_COUNT)
            auxiliary[kind] = [self._generate_auxiliary(rng, kind, rule, planet_count) for _ in range(count)]

        state = SystemState(
            star=star,
            planets=planets,
            stations=auxiliary[AuxiliaryKind.STATION],
            wrecks=auxiliary[AuxiliaryKind.WRECK],
            ufos=auxiliary[AuxiliaryKind.UFO],
        )
        logger.debug(
            f"Generated system for seed '{seed}': {len(state.planets)} planets, {state.moon_count} moons, "
            f"{len(state.stations)} stations, {len(state.wrecks)} wrecks, {len(state.ufos)} ufos"
        )
        return state

    def _generate_star(self, rng: SeededRandomStream) -> Star:
        color = rng.choice(self._palettes.star_color_keys)
        return Star(
            color=color,
            scale=rng.uniform(*STAR_SCALE, digits=1),
            light_intensity=DEFAULT_LIGHT_INTENSITY,
        )

    def _generate_planet(self, rng: SeededRandomStream, index: int) -> Planet:
        scale = rng.uniform(*PLANET_SCALE, digits=1)
        spin_speed = rng.uniform(*PLANET_SPIN_SPEED, digits=3)
        texture = rng.choice(self._palettes.planet_texture_keys)
        moons = [self._generate_moon(rng) for _ in range(rng.integer(*MOON_COUNT))]
        return Planet(
            scale=scale,
            orbit_radius=FIRST_PLANET_ORBIT_RADIUS + PLANET_ORBIT_SPACING * index,
            orbit_speed=DEFAULT_PLANET_ORBIT_SPEED,
            spin_speed=spin_speed,
            texture=texture,
            moons=moons,
        )

    def _generate_moon(self, rng: SeededRandomStream) -> Moon:
        return Moon(
            scale=rng.uniform(*MOON_SCALE, digits=2),
            orbit_radius=rng.integer(*MOON_ORBIT_RADIUS),
            orbit_speed=rng.uniform(*MOON_ORBIT_SPEED, digits=2),
            spin_speed=rng.uniform(*MOON_SPIN_SPEED, digits=3),
            texture=rng.choice(self._palettes.moon_texture_keys),
        )

    @staticmethod
    def _generate_auxiliary(
        rng: SeededRandomStream, kind: AuxiliaryKind, rule: AuxiliaryRule, planet_count: int
    ) -> AuxiliaryObject:
        scale = rng.uniform(*rule.scale, digits=1)
        orbit_radius = rng.integer(*rule.orbit_radius)
        orbit_speed = rng.uniform(*rule.orbit_speed, digits=2)
        spin_speed = rng.uniform(*rule.spin_speed, digits=3)
        # The index is only drawn when the object does not orbit the star
        parent = None if rng.next() < STAR_ORBIT_PROBABILITY else rng.index(planet_count)
        return AuxiliaryObject(
            kind=kind,
            scale=scale,
            orbit_radius=orbit_radius,
            orbit_speed=orbit_speed,
            spin_speed=spin_speed,
            parent_planet_index=parent,
        )


def generate(seed: str, palettes: Optional[Palettes] = None) -> SystemState:
    return SystemGenerator(palettes).generate(seed)
