from typing import Optional

import pydantic

from .body import AuxiliaryKind, OrbitingBody


class AuxiliaryObject(OrbitingBody):
    """A station, wreck or ufo. It orbits the star unless ``parent_planet_index`` names a planet."""

    kind: AuxiliaryKind
    parent_planet_index: Optional[pydantic.NonNegativeInt] = None

    @property
    def orbits_star(self) -> bool:
        return self.parent_planet_index is None
