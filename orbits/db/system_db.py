import logging
from enum import Enum

import astropy.units as u
import numpy as np
from astropy.table import QTable
from astropy.units import Quantity
from typing_extensions import Self

from orbits.stats import GRAVITY_UNIT, stats_for
from orbits.system import AnyBody, Planet, Star, SystemState

from .base_db import BaseDB

logger = logging.getLogger(__name__)

_ID_FIELD = "body_id"
STAR_ID = "star"


def planet_id(index: int) -> str:
    return f"planet[{index}]"


class SystemDB(BaseDB):
    """
    One row per body of a system, in SystemState.iter_bodies() order.

    Dtypes:
    ------------------
    body_id          str     "star", "planet[1]", "planet[1].moon[0]", "station[2]", ...
    kind             str     star | planet | moon | station | wreck | ufo
    parent_id        str     id of the orbited body, empty for the star
    palette_key      str     star color or texture, empty for auxiliary objects
    scale          float64
    orbit_radius   float64   NaN for the star
    orbit_speed    float64   NaN for the star
    spin_speed     float64   NaN for the star
    radius         float64 m       NaN unless star or planet
    mass           float64 kg      NaN unless star or planet
    gravity        float64 m / s2  NaN unless star or planet
    ------------------
    """

    def __init__(self, dataset: QTable):
        super().__init__(dataset=dataset, id_field=_ID_FIELD)

    def _factory(self, dataset: QTable) -> Self:
        return SystemDB(dataset)

    @classmethod
    def from_state(cls, state: SystemState) -> Self:
        return cls(_bodies_table(state))

    @property
    def kinds(self) -> np.ndarray:
        return np.asarray(self.view["kind"])

    def get_planets(self) -> Self:
        return self.where(kind="planet")

    def get_moons(self) -> Self:
        return self.where(kind="moon")

    def get_auxiliary_objects(self) -> Self:
        return self.where(kind=["station", "wreck", "ufo"])

    def orbiting(self, parent_id: str) -> Self:
        """Bodies whose orbit is centered on the given body."""
        return self.where(parent_id=parent_id)

    def total_mass(self) -> Quantity:
        """Sum of the masses of the star and the planets."""
        return np.nansum(self.view["mass"])


def _bodies_table(state: SystemState) -> QTable:
    table_rows = [(STAR_ID, state.star, "")]
    for i, planet in enumerate(state.planets):
        table_rows.append((planet_id(i), planet, STAR_ID))
        table_rows.extend((f"{planet_id(i)}.moon[{j}]", moon, planet_id(i)) for j, moon in enumerate(planet.moons))
    for objects in (state.stations, state.wrecks, state.ufos):
        for i, obj in enumerate(objects):
            parent = STAR_ID if obj.orbits_star else planet_id(obj.parent_planet_index)
            table_rows.append((f"{obj.kind.value}[{i}]", obj, parent))

    columns = {name: [] for name in ["body_id", "kind", "parent_id", "palette_key"]}
    numeric = {name: [] for name in ["scale", "orbit_radius", "orbit_speed", "spin_speed", "radius", "mass", "gravity"]}
    for body_id, body, parent in table_rows:
        columns["body_id"].append(body_id)
        columns["kind"].append(_kind_name(body))
        columns["parent_id"].append(parent)
        columns["palette_key"].append(_palette_key(body))
        numeric["scale"].append(body.scale)
        for field_name in ["orbit_radius", "orbit_speed", "spin_speed"]:
            numeric[field_name].append(getattr(body, field_name, np.nan))
        radius, mass, gravity = _physical_values(body)
        numeric["radius"].append(radius)
        numeric["mass"].append(mass)
        numeric["gravity"].append(gravity)

    table = QTable({name: np.array(values, dtype=str) for name, values in columns.items()})
    for name in ["scale", "orbit_radius", "orbit_speed", "spin_speed"]:
        table[name] = np.array(numeric[name], dtype=float)
    table["radius"] = np.array(numeric["radius"], dtype=float) * u.m
    table["mass"] = np.array(numeric["mass"], dtype=float) * u.kg
    table["gravity"] = np.array(numeric["gravity"], dtype=float) * GRAVITY_UNIT
    logger.debug(f"Built bodies table with {len(table)} rows")
    return table


def _kind_name(body: AnyBody) -> str:
    kind = body.kind
    return kind.value if isinstance(kind, Enum) else kind


def _palette_key(body: AnyBody) -> str:
    if isinstance(body, Star):
        return body.color
    return getattr(body, "texture", "")


def _physical_values(body: AnyBody) -> tuple[float, float, float]:
    if not isinstance(body, (Star, Planet)):
        return np.nan, np.nan, np.nan
    stats = stats_for(body)
    return stats.radius.to_value(u.m), stats.mass.to_value(u.kg), stats.gravity.to_value(GRAVITY_UNIT)
