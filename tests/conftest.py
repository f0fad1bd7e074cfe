import os
from pathlib import Path

import pytest

from orbits import AuxiliaryKind, AuxiliaryObject, Moon, Planet, Star, SystemState, generate

TEST_FOLDER_ROOT = Path(os.path.realpath(__file__)).parent
TEST_TMP_DIR = TEST_FOLDER_ROOT / "tmp"

# Seeds whose generated systems are checked value by value
ALPHA_SEED = "alpha"
BETA_SEED = "beta"

# Seeds used for checks that must hold for every generated system
SAMPLE_SEEDS = [
    "",
    "a",
    "x",
    "alpha",
    "beta",
    "gamma",
    "delta",
    "orbits",
    "seed-42",
    "Kepler",
    "Tatooine",
    "😀a",
    "a much longer seed with spaces and punctuation!",
] + [f"seed-{i}" for i in range(200)]


@pytest.fixture(scope="module")
def alpha_system() -> SystemState:
    return generate(ALPHA_SEED)


@pytest.fixture(scope="module")
def beta_system() -> SystemState:
    return generate(BETA_SEED)


@pytest.fixture(scope="module")
def sample_systems() -> dict[str, SystemState]:
    return {seed: generate(seed) for seed in SAMPLE_SEEDS}


@pytest.fixture
def handmade_system() -> SystemState:
    """Two planets, the second with two moons, and one object of each auxiliary kind."""
    return make_handmade_system()


def make_handmade_system() -> SystemState:
    return SystemState(
        star=Star(color="Yellow", scale=1.0, light_intensity=2.5),
        planets=[
            Planet(scale=1.0, orbit_radius=10, orbit_speed=0.1, spin_speed=0.01, texture="EarthLike"),
            Planet(
                scale=2.0,
                orbit_radius=15,
                orbit_speed=0.1,
                spin_speed=0.02,
                texture="GasGiant",
                moons=[
                    Moon(scale=0.3, orbit_radius=3, orbit_speed=0.3, spin_speed=0.01, texture="Gray"),
                    Moon(scale=0.2, orbit_radius=5, orbit_speed=-0.4, spin_speed=0.02, texture="IceMoon"),
                ],
            ),
        ],
        stations=[
            AuxiliaryObject(
                kind=AuxiliaryKind.STATION,
                scale=1.5,
                orbit_radius=12,
                orbit_speed=0.1,
                spin_speed=0.01,
                parent_planet_index=0,
            )
        ],
        wrecks=[
            AuxiliaryObject(kind=AuxiliaryKind.WRECK, scale=0.8, orbit_radius=20, orbit_speed=0.07, spin_speed=0.01)
        ],
        ufos=[
            AuxiliaryObject(
                kind=AuxiliaryKind.UFO,
                scale=0.5,
                orbit_radius=9,
                orbit_speed=0.12,
                spin_speed=0.02,
                parent_planet_index=1,
            )
        ],
    )
