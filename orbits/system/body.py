from enum import Enum

import pydantic


class BodyKind(str, Enum):
    STAR = "star"
    PLANET = "planet"
    MOON = "moon"
    STATION = "station"
    WRECK = "wreck"
    UFO = "ufo"


class AuxiliaryKind(str, Enum):
    STATION = "station"
    WRECK = "wreck"
    UFO = "ufo"


class Body(pydantic.BaseModel):
    """Immutable snapshot of a single body. Every concrete body is tagged by its ``kind`` field."""

    model_config = pydantic.ConfigDict(frozen=True, allow_inf_nan=False, extra="forbid")

    scale: pydantic.PositiveFloat


class OrbitingBody(Body):
    orbit_radius: pydantic.PositiveFloat
    orbit_speed: float
    spin_speed: float

    @property
    def is_retrograde(self) -> bool:
        return self.orbit_speed < 0
