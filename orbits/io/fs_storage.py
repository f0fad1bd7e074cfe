import json
from pathlib import Path

from orbits.io.base_storage import BaseStorage


class FsStorage(BaseStorage):
    """Stores each entry as a JSON file under ``root_path``."""

    def __init__(self, root_path: Path):
        self._root_path = Path(root_path)

    def root_path(self) -> Path:
        return self._root_path

    def _data_path(self, name: str) -> Path:
        return self._root_path / f"{name}.json"

    def contains(self, name: str) -> bool:
        return self._data_path(name).exists()

    def write_json(self, data: dict, name: str, override: bool = False):
        data_path = self._data_path(name)
        if data_path.exists() and not override:
            raise ValueError(f"File {name} already exists in {self._root_path}. Use override=True to overwrite.")

        data_path.parent.mkdir(parents=True, exist_ok=True)
        with open(data_path, "w") as f:
            f.write(json.dumps(data, indent=2))

    def read_json(self, name: str) -> dict:
        data_path = self._data_path(name)

        if not data_path.exists():
            raise ValueError(f"File {name} does not exist in {self._root_path}.")
        with open(data_path, "r") as f:
            return json.load(f)
