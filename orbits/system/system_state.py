from typing import Iterator, Union

import pydantic
from pydantic import model_validator
from typing_extensions import Self

from .auxiliary import AuxiliaryObject
from .body import AuxiliaryKind
from .planet import Moon, Planet
from .star import Star

AnyBody = Union[Star, Planet, Moon, AuxiliaryObject]

_AUXILIARY_FIELDS = {
    AuxiliaryKind.STATION: "stations",
    AuxiliaryKind.WRECK: "wrecks",
    AuxiliaryKind.UFO: "ufos",
}


class SystemState(pydantic.BaseModel):
    """
    Immutable snapshot of a whole planetary system.

    Snapshots are replaced wholesale, never modified: see ``orbits.edits`` for the operations
    that derive a new snapshot from an existing one.
    """

    model_config = pydantic.ConfigDict(frozen=True, extra="forbid")

    star: Star
    planets: tuple[Planet, ...] = ()
    stations: tuple[AuxiliaryObject, ...] = ()
    wrecks: tuple[AuxiliaryObject, ...] = ()
    ufos: tuple[AuxiliaryObject, ...] = ()

    @model_validator(mode="after")
    def _check_auxiliary_objects(self) -> Self:
        for kind, field_name in _AUXILIARY_FIELDS.items():
            for i, obj in enumerate(getattr(self, field_name)):
                if obj.kind != kind:
                    raise ValueError(f"{field_name}[{i}] has kind '{obj.kind.value}', expected '{kind.value}'")
                parent = obj.parent_planet_index
                if parent is not None and parent >= len(self.planets):
                    raise ValueError(
                        f"{field_name}[{i}] orbits planet {parent}, but the system has {len(self.planets)} planets"
                    )
        return self

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        lines = [self.star.to_string()]
        for i, planet in enumerate(self.planets):
            lines.append(f"  [{i}] {planet.to_string()}")
        lines.append(f"  stations: {len(self.stations)}, wrecks: {len(self.wrecks)}, ufos: {len(self.ufos)}")
        return "\n".join(lines)

    @staticmethod
    def auxiliary_field(kind: AuxiliaryKind) -> str:
        return _AUXILIARY_FIELDS[AuxiliaryKind(kind)]

    def auxiliary(self, kind: AuxiliaryKind) -> tuple[AuxiliaryObject, ...]:
        return getattr(self, self.auxiliary_field(kind))

    @property
    def moon_count(self) -> int:
        return sum(len(p.moons) for p in self.planets)

    def iter_auxiliary(self) -> Iterator[AuxiliaryObject]:
        for field_name in _AUXILIARY_FIELDS.values():
            yield from getattr(self, field_name)

    def iter_bodies(self) -> Iterator[AnyBody]:
        """Star first, then each planet followed by its moons, then stations, wrecks and ufos."""
        yield self.star
        for planet in self.planets:
            yield planet
            yield from planet.moons
        yield from self.iter_auxiliary()

    def satellites_of(self, planet_index: int) -> list[AuxiliaryObject]:
        return [obj for obj in self.iter_auxiliary() if obj.parent_planet_index == planet_index]
