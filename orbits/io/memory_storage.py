import copy
from pathlib import Path
from typing import Optional

from orbits.io.base_storage import BaseStorage


class MemoryStorage(BaseStorage):
    """
    Key/value storage living in memory.

    The memory belongs to the instance, or to whoever passes it in: instances only see each
    other's data when they are explicitly given the same ``memory`` dictionary.
    """

    def __init__(self, name: str = "default", memory: Optional[dict] = None):
        self._mem_key = Path(f"/memory/{name}")
        self._memory = memory if memory is not None else {}

    def root_path(self) -> Path:
        return self._mem_key

    def __len__(self) -> int:
        return sum(1 for key in self._memory if self._mem_key in key.parents)

    def _get_prefixed_key(self, name: str, suffix: str) -> Path:
        """Create a key with instance name prefix and specified suffix"""
        return self._mem_key / f"{name}{suffix}"

    def contains(self, name: str) -> bool:
        return self._get_prefixed_key(name, ".json") in self._memory

    def write_json(self, data: dict, name: str, override: bool = False):
        """
        Store JSON data directly in memory without serialization.

        Args:
            data: Dictionary data to store
            name: Path-like name to use as key
            override: Whether to override existing data
        """
        key = self._get_prefixed_key(name, ".json")

        if key in self._memory and not override:
            raise ValueError(f"Data with key '{key}' already exists. Use override=True to overwrite.")

        # Store a deep copy of the data to prevent external modifications
        self._memory[key] = copy.deepcopy(data)

    def read_json(self, name: str) -> dict:
        key = self._get_prefixed_key(name, ".json")

        if key not in self._memory:
            raise ValueError(f"Data with key '{key}' does not exist.")

        return copy.deepcopy(self._memory[key])

    def clear(self):
        """Drops every entry written through this instance's namespace."""
        for key in [k for k in self._memory if self._mem_key in k.parents]:
            del self._memory[key]
