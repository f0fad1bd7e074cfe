"""
Snapshot edits.

Each function takes a SystemState and returns a new one; the input snapshot is left untouched.
Changed values go through model validation again, so an edit can never produce a state that
breaks the system invariants.
"""

from typing import Any, Optional, Sequence, TypeVar

from orbits.config import Palettes, resolve_palettes
from orbits.constants import DEFAULT_PLANET_ORBIT_SPEED, FIRST_PLANET_ORBIT_RADIUS, PLANET_ORBIT_SPACING
from orbits.system import AuxiliaryKind, AuxiliaryObject, Moon, Planet, SystemState

M = TypeVar("M")


def new_planet(index: int, palettes: Optional[Palettes] = None) -> Planet:
    """
    The planet added by the editor when none is given: Earth-sized, on the next free lane,
    with the first texture of the palettes.
    """
    return Planet(
        scale=1.0,
        orbit_radius=FIRST_PLANET_ORBIT_RADIUS + PLANET_ORBIT_SPACING * index,
        orbit_speed=DEFAULT_PLANET_ORBIT_SPEED,
        spin_speed=0.01,
        texture=resolve_palettes(palettes).planet_texture_keys[0],
    )


def new_moon(palettes: Optional[Palettes] = None) -> Moon:
    texture = resolve_palettes(palettes).moon_texture_keys[0]
    return Moon(scale=0.3, orbit_radius=3, orbit_speed=0.3, spin_speed=0.01, texture=texture)


def new_auxiliary(kind: AuxiliaryKind) -> AuxiliaryObject:
    return AuxiliaryObject(kind=kind, scale=1.0, orbit_radius=10, orbit_speed=0.1, spin_speed=0.01)


def _replace(model: M, **changes: Any) -> M:
    return type(model).model_validate({**dict(model), **changes})


def _check_index(items: Sequence, index: int, name: str):
    if not 0 <= index < len(items):
        raise IndexError(f"{name} index {index} out of range, there are {len(items)} {name}s")


def _without(items: Sequence[M], index: int) -> tuple[M, ...]:
    return tuple(item for i, item in enumerate(items) if i != index)


def _with(items: Sequence[M], index: int, item: M) -> tuple[M, ...]:
    return tuple(item if i == index else old for i, old in enumerate(items))


def update_star(state: SystemState, **changes: Any) -> SystemState:
    return _replace(state, star=_replace(state.star, **changes))


def add_planet(
    state: SystemState, planet: Optional[Planet] = None, palettes: Optional[Palettes] = None
) -> SystemState:
    planet = planet or new_planet(len(state.planets), palettes)
    return _replace(state, planets=(*state.planets, planet))


def remove_planet(state: SystemState, index: int) -> SystemState:
    """
    Removes a planet and its moons.

    Objects that orbited the removed planet move to the star; objects orbiting later planets keep
    orbiting the same planet, whose index shifts down by one.
    """
    _check_index(state.planets, index, "planet")

    def reparent(obj: AuxiliaryObject) -> AuxiliaryObject:
        parent = obj.parent_planet_index
        if parent is None or parent < index:
            return obj
        return _replace(obj, parent_planet_index=None if parent == index else parent - 1)

    return SystemState(
        star=state.star,
        planets=_without(state.planets, index),
        stations=[reparent(o) for o in state.stations],
        wrecks=[reparent(o) for o in state.wrecks],
        ufos=[reparent(o) for o in state.ufos],
    )


def update_planet(state: SystemState, index: int, **changes: Any) -> SystemState:
    _check_index(state.planets, index, "planet")
    planet = _replace(state.planets[index], **changes)
    return _replace(state, planets=_with(state.planets, index, planet))


def add_moon(
    state: SystemState, planet_index: int, moon: Optional[Moon] = None, palettes: Optional[Palettes] = None
) -> SystemState:
    _check_index(state.planets, planet_index, "planet")
    planet = state.planets[planet_index]
    return update_planet(state, planet_index, moons=(*planet.moons, moon or new_moon(palettes)))


def remove_moon(state: SystemState, planet_index: int, moon_index: int) -> SystemState:
    _check_index(state.planets, planet_index, "planet")
    planet = state.planets[planet_index]
    _check_index(planet.moons, moon_index, "moon")
    return update_planet(state, planet_index, moons=_without(planet.moons, moon_index))


def update_moon(state: SystemState, planet_index: int, moon_index: int, **changes: Any) -> SystemState:
    _check_index(state.planets, planet_index, "planet")
    planet = state.planets[planet_index]
    _check_index(planet.moons, moon_index, "moon")
    moon = _replace(planet.moons[moon_index], **changes)
    return update_planet(state, planet_index, moons=_with(planet.moons, moon_index, moon))


def add_auxiliary(
    state: SystemState, kind: AuxiliaryKind, obj: Optional[AuxiliaryObject] = None
) -> SystemState:
    kind = AuxiliaryKind(kind)
    field_name = SystemState.auxiliary_field(kind)
    obj = obj or new_auxiliary(kind)
    return _replace(state, **{field_name: (*state.auxiliary(kind), obj)})


def remove_auxiliary(state: SystemState, kind: AuxiliaryKind, index: int) -> SystemState:
    objects = state.auxiliary(kind)
    _check_index(objects, index, AuxiliaryKind(kind).value)
    return _replace(state, **{SystemState.auxiliary_field(kind): _without(objects, index)})


def update_auxiliary(state: SystemState, kind: AuxiliaryKind, index: int, **changes: Any) -> SystemState:
    objects = state.auxiliary(kind)
    _check_index(objects, index, AuxiliaryKind(kind).value)
    obj = _replace(objects[index], **changes)
    return _replace(state, **{SystemState.auxiliary_field(kind): _with(objects, index, obj)})
