import astropy.units as u

# Reference bodies. These differ from the IAU nominal values in astropy.constants
EARTH_RADIUS = 6_371_000 * u.m
EARTH_MASS = 5.972e24 * u.kg
EARTH_GRAVITY = 9.81 * u.m / u.s**2
SUN_RADIUS = 6.957e8 * u.m
SUN_MASS = 1.989e30 * u.kg
GRAVITATIONAL_CONSTANT = 6.6743e-11 * u.m**3 / (u.kg * u.s**2)

# Values assigned by the generator rather than drawn
DEFAULT_LIGHT_INTENSITY = 2.5
DEFAULT_PLANET_ORBIT_SPEED = 0.1
FIRST_PLANET_ORBIT_RADIUS = 10
PLANET_ORBIT_SPACING = 5

# Seeded stream parameters
STREAM_INCREMENT = 0x7FFFFFF
UINT32_MAX = 0xFFFFFFFF
