from orbits.datasets.solar_systems import SolarSystemDataset

__all__ = [
    "SolarSystemDataset",
]
