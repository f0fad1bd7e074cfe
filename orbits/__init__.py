"""Orbits - Deterministic generation, statistics and portable seeds of miniature planetary systems."""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("orbits")
except importlib.metadata.PackageNotFoundError:
    # Package is not installed, try to read from pyproject.toml
    import os
    from pathlib import Path

    import tomli

    pyproject_path = Path(os.path.realpath(__file__)).parent.parent / "pyproject.toml"
    try:
        with open(pyproject_path, "rb") as f:
            __version__ = tomli.load(f)["project"]["version"]
    except (FileNotFoundError, KeyError):
        __version__ = "0.0.0"


from .codec import DecodeError, SeedCodec, decode, encode
from .config import DEFAULT_PALETTES, Palettes
from .datasets import SolarSystemDataset
from .db import SystemDB
from .generator import SystemGenerator, generate
from .io import FsStorage, MemoryStorage
from .random_stream import SeededRandomStream, create_stream
from .stats import BodyStats, InvalidScaleError, compute_stats, stats_for
from .system import AuxiliaryKind, AuxiliaryObject, BodyKind, Moon, Planet, Star, SystemState

__all__ = [
    # Core operations
    "generate",
    "compute_stats",
    "encode",
    "decode",
    # Components
    "SeededRandomStream",
    "create_stream",
    "SystemGenerator",
    "SeedCodec",
    "BodyStats",
    "stats_for",
    # Errors
    "DecodeError",
    "InvalidScaleError",
    # System types
    "SystemState",
    "Star",
    "Planet",
    "Moon",
    "AuxiliaryObject",
    "BodyKind",
    "AuxiliaryKind",
    # Configuration
    "Palettes",
    "DEFAULT_PALETTES",
    # Storage and datasets
    "MemoryStorage",
    "FsStorage",
    "SolarSystemDataset",
    "SystemDB",
]
