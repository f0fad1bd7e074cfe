import abc
from pathlib import Path


class BaseStorage(abc.ABC):
    @abc.abstractmethod
    def root_path(self) -> Path:
        pass

    @abc.abstractmethod
    def contains(self, name: str) -> bool:
        pass

    @abc.abstractmethod
    def write_json(self, data: dict, name: str, override: bool = False):
        pass

    @abc.abstractmethod
    def read_json(self, name: str) -> dict:
        pass
