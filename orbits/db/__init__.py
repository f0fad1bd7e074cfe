"""Tabular views over planetary systems."""

from .system_db import SystemDB

__all__ = [
    "SystemDB",
]
