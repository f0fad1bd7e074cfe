"""Planetary system descriptors."""

from .auxiliary import AuxiliaryObject
from .body import AuxiliaryKind, Body, BodyKind, OrbitingBody
from .planet import Moon, Planet
from .star import Star
from .system_state import AnyBody, SystemState

__all__ = [
    "Body",
    "BodyKind",
    "AuxiliaryKind",
    "OrbitingBody",
    "Star",
    "Planet",
    "Moon",
    "AuxiliaryObject",
    "SystemState",
    "AnyBody",
]
