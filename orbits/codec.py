"""
Portable text form of a SystemState.

A system is written as JSON, using the field names of the original web application, and
wrapped in standard base64 so that it can be pasted anywhere as a single token.
"""

import base64
import logging
from typing import Optional, Union

import pydantic
from pydantic.alias_generators import to_camel

from orbits.config import Palettes, resolve_palettes
from orbits.system import AuxiliaryKind, AuxiliaryObject, Moon, Planet, Star, SystemState

logger = logging.getLogger(__name__)

_MAX_REPORTED_ERRORS = 3
_WHITESPACE = " \t\n\f\r"
_WHITESPACE_TABLE = str.maketrans("", "", _WHITESPACE)


class DecodeError(ValueError):
    """The text is not a valid encoded system. The message is meant to be shown to the user."""


class _Payload(pydantic.BaseModel):
    # Unknown fields are ignored so that newer seeds still load
    model_config = pydantic.ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class OrbitPayload(_Payload):
    scale: float = pydantic.Field(alias="size")
    orbit_radius: float
    orbit_speed: float
    spin_speed: float


class MoonPayload(OrbitPayload):
    texture: str


class PlanetPayload(MoonPayload):
    moons: list[MoonPayload] = []


class OrbitObjectPayload(OrbitPayload):
    parent_planet_index: Optional[pydantic.StrictInt] = None


class SystemPayload(_Payload):
    star_type: str = pydantic.Field(min_length=1)
    star_size: float
    star_light_intensity: float
    planets: list[PlanetPayload]
    space_stations: list[OrbitObjectPayload]
    ship_wrecks: list[OrbitObjectPayload]
    ufos: list[OrbitObjectPayload]

    @classmethod
    def from_state(cls, state: SystemState) -> "SystemPayload":
        return cls(
            star_type=state.star.color,
            star_size=state.star.scale,
            star_light_intensity=state.star.light_intensity,
            planets=[
                PlanetPayload(
                    moons=[MoonPayload(**_orbit_fields(m), texture=m.texture) for m in p.moons],
                    texture=p.texture,
                    **_orbit_fields(p),
                )
                for p in state.planets
            ],
            space_stations=[_object_payload(o) for o in state.stations],
            ship_wrecks=[_object_payload(o) for o in state.wrecks],
            ufos=[_object_payload(o) for o in state.ufos],
        )

    def to_state(self) -> SystemState:
        return SystemState(
            star=Star(color=self.star_type, scale=self.star_size, light_intensity=self.star_light_intensity),
            planets=[
                Planet(
                    moons=[Moon(**m.model_dump()) for m in p.moons],
                    **p.model_dump(exclude={"moons"}),
                )
                for p in self.planets
            ],
            stations=[AuxiliaryObject(kind=AuxiliaryKind.STATION, **o.model_dump()) for o in self.space_stations],
            wrecks=[AuxiliaryObject(kind=AuxiliaryKind.WRECK, **o.model_dump()) for o in self.ship_wrecks],
            ufos=[AuxiliaryObject(kind=AuxiliaryKind.UFO, **o.model_dump()) for o in self.ufos],
        )


def _orbit_fields(body) -> dict:
    return {
        "scale": body.scale,
        "orbit_radius": body.orbit_radius,
        "orbit_speed": body.orbit_speed,
        "spin_speed": body.spin_speed,
    }


def _object_payload(obj: AuxiliaryObject) -> OrbitObjectPayload:
    return OrbitObjectPayload(parent_planet_index=obj.parent_planet_index, **_orbit_fields(obj))


def _remove_whitespace(text: Union[str, bytes]) -> Union[str, bytes]:
    """Seeds may be wrapped or indented, only ASCII whitespace is dropped."""
    if isinstance(text, bytes):
        return text.translate(None, _WHITESPACE.encode("ascii"))
    return text.translate(_WHITESPACE_TABLE)


def _describe(error: pydantic.ValidationError) -> str:
    details = []
    for e in error.errors()[:_MAX_REPORTED_ERRORS]:
        location = ".".join(str(part) for part in e["loc"])
        details.append(f"{location}: {e['msg']}" if location else e["msg"])
    if error.error_count() > _MAX_REPORTED_ERRORS:
        details.append(f"... and {error.error_count() - _MAX_REPORTED_ERRORS} more")
    return "; ".join(details)


class SeedCodec:
    """
    Converts systems to and from their portable text form.

    Decoding is strict: besides the presence of the required fields, every value must be
    in range, parent indices must point to existing planets and palette keys must belong
    to the codec's palettes. Anything else raises DecodeError.
    """

    def __init__(self, palettes: Optional[Palettes] = None):
        self._palettes = resolve_palettes(palettes)

    @property
    def palettes(self) -> Palettes:
        return self._palettes

    def encode(self, state: SystemState) -> str:
        json_bytes = SystemPayload.from_state(state).model_dump_json(by_alias=True).encode("utf-8")
        return base64.b64encode(json_bytes).decode("ascii")

    def decode(self, text: str) -> SystemState:
        if not isinstance(text, (str, bytes)):
            raise DecodeError(f"Expected a text seed, got {type(text).__name__}")

        try:
            json_bytes = base64.b64decode(_remove_whitespace(text), validate=True)
        except ValueError as e:
            logger.debug(f"Seed rejected, invalid base64: {e}")
            raise DecodeError("Invalid seed: not a base64 encoded system") from e

        try:
            payload = SystemPayload.model_validate_json(json_bytes)
        except pydantic.ValidationError as e:
            logger.debug(f"Seed rejected, invalid payload: {e}")
            raise DecodeError(f"Invalid seed format: {_describe(e)}") from e

        try:
            state = payload.to_state()
        except pydantic.ValidationError as e:
            logger.debug(f"Seed rejected, invalid values: {e}")
            raise DecodeError(f"Invalid seed values: {_describe(e)}") from e

        self._check_palette_keys(state)
        return state

    def _check_palette_keys(self, state: SystemState):
        if state.star.color not in self._palettes.star_colors:
            raise DecodeError(f"Invalid seed values: unknown star color '{state.star.color}'")
        for i, planet in enumerate(state.planets):
            if planet.texture not in self._palettes.planet_textures:
                raise DecodeError(f"Invalid seed values: unknown planet texture '{planet.texture}' (planet {i})")
            for j, moon in enumerate(planet.moons):
                if moon.texture not in self._palettes.moon_textures:
                    raise DecodeError(
                        f"Invalid seed values: unknown moon texture '{moon.texture}' (planet {i}, moon {j})"
                    )


_DEFAULT_CODEC = SeedCodec()


def encode(state: SystemState) -> str:
    return _DEFAULT_CODEC.encode(state)


def decode(text: str, palettes: Optional[Palettes] = None) -> SystemState:
    codec = _DEFAULT_CODEC if palettes is None else SeedCodec(palettes)
    return codec.decode(text)
