from typing import Literal

import pydantic

from .body import Body


class Star(Body):
    kind: Literal["star"] = "star"
    color: str
    light_intensity: pydantic.PositiveFloat

    def to_string(self) -> str:
        return f"{self.color} star, scale: {self.scale}, light: {self.light_intensity}"
