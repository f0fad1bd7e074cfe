from typing import Literal

from .body import OrbitingBody


class Moon(OrbitingBody):
    kind: Literal["moon"] = "moon"
    texture: str


class Planet(OrbitingBody):
    kind: Literal["planet"] = "planet"
    texture: str
    moons: tuple[Moon, ...] = ()

    def to_string(self) -> str:
        return (
            f"{self.texture}, "
            f"scale: {self.scale}, "
            f"orbit: {self.orbit_radius}, "
            f"speed: {self.orbit_speed}, "
            f"spin: {self.spin_speed}, "
            f"moons: {len(self.moons)}"
        )
