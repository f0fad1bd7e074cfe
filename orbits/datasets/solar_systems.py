import hashlib
import logging
from typing import Optional

from orbits.codec import SeedCodec
from orbits.config import Palettes
from orbits.datasets.base_dataset import BaseDataset
from orbits.db import SystemDB
from orbits.generator import SystemGenerator
from orbits.io import BaseStorage
from orbits.system import SystemState

logger = logging.getLogger(__name__)


class SolarSystemDataset(BaseDataset):
    """
    Generated and hand-made systems, kept in a storage as encoded seeds.

    Generated systems are cached by their text seed; hand-made ones are saved under a name.
    Either way the storage only ever holds the portable encoded form.
    """

    _DATASET_NAME = "solar_systems"

    def __init__(
        self,
        dataset_tag: Optional[str] = None,
        storage: Optional[BaseStorage] = None,
        palettes: Optional[Palettes] = None,
    ):
        super().__init__(dataset_name=self._DATASET_NAME, dataset_tag=dataset_tag, storage=storage)
        self._generator = SystemGenerator(palettes)
        self._codec = SeedCodec(palettes)

    @property
    def codec(self) -> SeedCodec:
        return self._codec

    def _generated_key(self, seed: str) -> str:
        # Keyed by the seed and the palette keys
        palettes = self._codec.palettes
        digest = hashlib.sha1(seed.encode("utf-8", "surrogatepass"))
        for keys in (palettes.star_color_keys, palettes.planet_texture_keys, palettes.moon_texture_keys):
            digest.update(b"\0" + "\x1f".join(keys).encode("utf-8"))
        digest = digest.hexdigest()
        return f"{self.name}_generated_{digest}"

    def _saved_key(self, name: str) -> str:
        return f"{self.name}_saved_{name}"

    def load_or_generate(self, seed: str) -> SystemState:
        key = self._generated_key(seed)
        if self._storage.contains(key):
            logger.debug(f"Loading cached system for seed '{seed}'")
            return self._codec.decode(self._storage.read_json(key)["code"])

        state = self._generator.generate(seed)
        self._storage.write_json({"seed": seed, "code": self._codec.encode(state)}, key)
        logger.info(f"Generated system for seed '{seed}' with {len(state.planets)} planets")
        return state

    def load_system_db(self, seed: str) -> SystemDB:
        return SystemDB.from_state(self.load_or_generate(seed))

    def save_system(self, name: str, state: SystemState, override: bool = False) -> str:
        """
        Stores a system under the given name.

        Returns:
            The encoded seed, ready to be shared.
        """
        code = self._codec.encode(state)
        self._storage.write_json({"name": name, "code": code}, self._saved_key(name), override=override)
        logger.info(f"Saved system '{name}'")
        return code

    def import_system(self, name: str, code: str, override: bool = False) -> SystemState:
        """Decodes a shared seed and stores it. Raises DecodeError if the seed is invalid."""
        state = self._codec.decode(code)
        self.save_system(name, state, override=override)
        return state

    def load_system(self, name: str) -> Optional[SystemState]:
        key = self._saved_key(name)
        if not self._storage.contains(key):
            logger.info(f"System '{name}' not found. You need to save it first by calling save_system().")
            return None
        return self._codec.decode(self._storage.read_json(key)["code"])
