import pydantic
import pytest

from orbits import AuxiliaryKind, AuxiliaryObject, BodyKind, Moon, Planet, Star, SystemState


class TestBodies:
    def test_kinds(self, handmade_system: SystemState):
        assert handmade_system.star.kind == BodyKind.STAR
        assert handmade_system.planets[0].kind == BodyKind.PLANET
        assert handmade_system.planets[1].moons[0].kind == BodyKind.MOON
        assert handmade_system.stations[0].kind == AuxiliaryKind.STATION

    def test_bodies_are_frozen(self, handmade_system: SystemState):
        with pytest.raises(pydantic.ValidationError):
            handmade_system.star.scale = 2.0
        with pytest.raises(pydantic.ValidationError):
            handmade_system.planets = ()

    @pytest.mark.parametrize("scale", [0, -1.0, float("nan"), float("inf")])
    def test_invalid_scale(self, scale):
        with pytest.raises(pydantic.ValidationError):
            Star(color="Blue", scale=scale, light_intensity=2.5)
        with pytest.raises(pydantic.ValidationError):
            Moon(scale=scale, orbit_radius=3, orbit_speed=0.3, spin_speed=0.01, texture="Gray")

    def test_invalid_orbit_radius(self):
        with pytest.raises(pydantic.ValidationError):
            Planet(scale=1.0, orbit_radius=0, orbit_speed=0.1, spin_speed=0.01, texture="Rocky")

    def test_unknown_field(self):
        with pytest.raises(pydantic.ValidationError):
            Star(color="Blue", scale=1.0, light_intensity=2.5, name="Sol")

    def test_retrograde(self):
        moon = Moon(scale=0.3, orbit_radius=3, orbit_speed=-0.3, spin_speed=0.01, texture="Gray")
        assert moon.is_retrograde
        assert not moon.model_copy(update={"orbit_speed": 0.3}).is_retrograde

    def test_negative_parent_index(self):
        with pytest.raises(pydantic.ValidationError):
            AuxiliaryObject(
                kind=AuxiliaryKind.UFO,
                scale=1.0,
                orbit_radius=10,
                orbit_speed=0.1,
                spin_speed=0.01,
                parent_planet_index=-1,
            )


class TestSystemState:
    def test_parent_must_exist(self, handmade_system: SystemState):
        ufo = handmade_system.ufos[0].model_copy(update={"parent_planet_index": 2})
        with pytest.raises(pydantic.ValidationError) as excinfo:
            SystemState(star=handmade_system.star, planets=handmade_system.planets, ufos=[ufo])
        assert "ufos[0] orbits planet 2" in str(excinfo.value)

    def test_kind_must_match_sequence(self, handmade_system: SystemState):
        with pytest.raises(pydantic.ValidationError) as excinfo:
            SystemState(star=handmade_system.star, stations=handmade_system.wrecks)
        assert "expected 'station'" in str(excinfo.value)

    def test_star_only_system(self):
        state = SystemState(star=Star(color="Blue", scale=1.0, light_intensity=2.5))
        assert state.planets == ()
        assert list(state.iter_bodies()) == [state.star]

    def test_iter_bodies_order(self, handmade_system: SystemState):
        bodies = list(handmade_system.iter_bodies())
        assert [b.kind for b in bodies] == [
            BodyKind.STAR,
            BodyKind.PLANET,
            BodyKind.PLANET,
            BodyKind.MOON,
            BodyKind.MOON,
            BodyKind.STATION,
            BodyKind.WRECK,
            BodyKind.UFO,
        ]

    def test_auxiliary_accessors(self, handmade_system: SystemState):
        assert handmade_system.auxiliary(AuxiliaryKind.WRECK) == handmade_system.wrecks
        assert handmade_system.auxiliary("ufo") == handmade_system.ufos
        assert SystemState.auxiliary_field(AuxiliaryKind.STATION) == "stations"
        assert len(list(handmade_system.iter_auxiliary())) == 3
        assert handmade_system.moon_count == 2

    def test_satellites_of(self, handmade_system: SystemState):
        assert handmade_system.satellites_of(0) == [handmade_system.stations[0]]
        assert handmade_system.satellites_of(1) == [handmade_system.ufos[0]]

    def test_to_string(self, handmade_system: SystemState):
        text = str(handmade_system)
        assert text.splitlines()[0] == "Yellow star, scale: 1.0, light: 2.5"
        assert "[1] GasGiant" in text
        assert "moons: 2" in text
        assert "stations: 1, wrecks: 1, ufos: 1" in text
