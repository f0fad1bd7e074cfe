from typing import Optional

import pydantic

# Keys map to the asset the rendering side uses for them. Key order is significant:
# the generator draws palette entries by position.
STAR_COLORS = {
    "Blue": "#84b6f4",
    "White": "#ffffff",
    "Yellow-White": "#ffffc2",
    "Yellow": "#fff68f",
    "Orangish Red": "#ff9933",
}

PLANET_TEXTURES = {
    "EarthLike": "/textures/earth.jpg",
    "GasGiant": "/textures/jupiter.jpg",
    "Forestworld": "/textures/forestworld.jpg",
    "Rocky": "/textures/mars.jpg",
    "Desert": "/textures/desert.jpg",
    "WaterWorld": "/textures/waterworld.jpg",
    "LavaPlanet": "/textures/lavaplanet.jpg",
    "MagmaPlanet": "/textures/magma.png",
}

MOON_TEXTURES = {
    "Gray": "/textures-moons/moon_gray.jpg",
    "Cratered": "/textures-moons/moon_cratered.jpg",
    "IceMoon": "/textures-moons/moon_ice.jpg",
    "ForestMoon": "/textures-moons/forest.jpg",
}


class Palettes(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    star_colors: dict[str, str] = pydantic.Field(default_factory=lambda: dict(STAR_COLORS))
    planet_textures: dict[str, str] = pydantic.Field(default_factory=lambda: dict(PLANET_TEXTURES))
    moon_textures: dict[str, str] = pydantic.Field(default_factory=lambda: dict(MOON_TEXTURES))

    @pydantic.field_validator("star_colors", "planet_textures", "moon_textures")
    @classmethod
    def _not_empty(cls, value: dict[str, str]) -> dict[str, str]:
        if len(value) == 0:
            raise ValueError("a palette needs at least one entry")
        return value

    @property
    def star_color_keys(self) -> list[str]:
        return list(self.star_colors)

    @property
    def planet_texture_keys(self) -> list[str]:
        return list(self.planet_textures)

    @property
    def moon_texture_keys(self) -> list[str]:
        return list(self.moon_textures)


DEFAULT_PALETTES = Palettes()


def resolve_palettes(palettes: Optional[Palettes]) -> Palettes:
    return palettes or DEFAULT_PALETTES
