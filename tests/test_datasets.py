import shutil

import pytest

from orbits import (
    DecodeError,
    FsStorage,
    MemoryStorage,
    Palettes,
    SolarSystemDataset,
    SystemDB,
    SystemState,
    encode,
    generate,
)

from .conftest import ALPHA_SEED, BETA_SEED, TEST_TMP_DIR

_TEST_DIR = TEST_TMP_DIR / "datasets_test"


class TestSolarSystemDataset:
    def teardown_method(self):
        if _TEST_DIR.exists():
            shutil.rmtree(_TEST_DIR)

    def test_names(self):
        assert SolarSystemDataset().name == "solar_systems"
        assert SolarSystemDataset(dataset_tag="campaign").name == "solar_systems_campaign"

    def test_default_storage(self):
        dataset = SolarSystemDataset()
        assert isinstance(dataset.storage, MemoryStorage)
        # Each dataset gets its own cache
        assert SolarSystemDataset().storage is not dataset.storage

    def test_given_empty_storage_is_used(self):
        storage = MemoryStorage()
        assert SolarSystemDataset(storage=storage).storage is storage

    def test_load_or_generate(self, alpha_system: SystemState):
        storage = MemoryStorage()
        dataset = SolarSystemDataset(storage=storage)

        state = dataset.load_or_generate(ALPHA_SEED)
        assert state == alpha_system
        assert len(storage) == 1

        # The second call is served from the cache
        assert dataset.load_or_generate(ALPHA_SEED) == alpha_system
        assert len(storage) == 1

        dataset.load_or_generate(BETA_SEED)
        assert len(storage) == 2

    def test_cached_entry(self, alpha_system: SystemState):
        storage = MemoryStorage()
        dataset = SolarSystemDataset(storage=storage)
        dataset.load_or_generate(ALPHA_SEED)

        key = dataset._generated_key(ALPHA_SEED)
        assert storage.read_json(key) == {"seed": ALPHA_SEED, "code": encode(alpha_system)}

    def test_cache_is_read_back(self):
        storage = MemoryStorage()
        dataset = SolarSystemDataset(storage=storage)
        beta_code = encode(generate(BETA_SEED))

        # A cache entry always wins over generation
        storage.write_json({"seed": ALPHA_SEED, "code": beta_code}, dataset._generated_key(ALPHA_SEED))
        assert dataset.load_or_generate(ALPHA_SEED) == generate(BETA_SEED)

    def test_shared_storage(self):
        memory = {}
        first = SolarSystemDataset(storage=MemoryStorage(memory=memory))
        second = SolarSystemDataset(storage=MemoryStorage(memory=memory))

        first.load_or_generate(ALPHA_SEED)
        assert second.storage.contains(second._generated_key(ALPHA_SEED))

    def test_tags_do_not_share_entries(self):
        storage = MemoryStorage()
        SolarSystemDataset(storage=storage).load_or_generate(ALPHA_SEED)
        tagged = SolarSystemDataset(dataset_tag="other", storage=storage)
        assert not storage.contains(tagged._generated_key(ALPHA_SEED))

    def test_palettes_do_not_share_entries(self):
        storage = MemoryStorage()
        palettes = Palettes(moon_textures={"Dust": "/textures-moons/dust.jpg"})
        default = SolarSystemDataset(storage=storage)
        custom = SolarSystemDataset(storage=storage, palettes=palettes)

        assert default._generated_key(ALPHA_SEED) != custom._generated_key(ALPHA_SEED)
        assert default.load_or_generate(ALPHA_SEED) == generate(ALPHA_SEED)
        assert custom.load_or_generate(ALPHA_SEED) == generate(ALPHA_SEED, palettes)
        assert len(storage) == 2

    def test_load_system_db(self, beta_system: SystemState):
        db = SolarSystemDataset().load_system_db(BETA_SEED)
        assert isinstance(db, SystemDB)
        assert len(db.get_planets()) == len(beta_system.planets)

    def test_save_and_load_system(self, handmade_system: SystemState):
        dataset = SolarSystemDataset()
        code = dataset.save_system("home", handmade_system)

        assert code == encode(handmade_system)
        assert dataset.load_system("home") == handmade_system

    def test_load_missing_system(self):
        assert SolarSystemDataset().load_system("nowhere") is None

    def test_save_system_without_override(self, handmade_system: SystemState, alpha_system: SystemState):
        dataset = SolarSystemDataset()
        dataset.save_system("home", handmade_system)

        with pytest.raises(ValueError) as excinfo:
            dataset.save_system("home", alpha_system)
        assert "already exists" in str(excinfo.value)
        assert dataset.load_system("home") == handmade_system

        dataset.save_system("home", alpha_system, override=True)
        assert dataset.load_system("home") == alpha_system

    def test_import_system(self, alpha_system: SystemState):
        dataset = SolarSystemDataset()
        state = dataset.import_system("shared", encode(alpha_system))

        assert state == alpha_system
        assert dataset.load_system("shared") == alpha_system

    def test_import_invalid_system(self):
        storage = MemoryStorage()
        dataset = SolarSystemDataset(storage=storage)

        with pytest.raises(DecodeError):
            dataset.import_system("broken", "definitely not a seed")
        assert len(storage) == 0
        assert dataset.load_system("broken") is None

    def test_fs_storage(self, alpha_system: SystemState, handmade_system: SystemState):
        dataset = SolarSystemDataset(storage=FsStorage(_TEST_DIR))
        dataset.load_or_generate(ALPHA_SEED)
        dataset.save_system("home", handmade_system)

        assert len(list(_TEST_DIR.glob("*.json"))) == 2
        assert (_TEST_DIR / "solar_systems_saved_home.json").exists()

        # A new dataset over the same folder sees the stored systems
        reopened = SolarSystemDataset(storage=FsStorage(_TEST_DIR))
        assert reopened.load_system("home") == handmade_system
        assert reopened.storage.contains(reopened._generated_key(ALPHA_SEED))
        assert reopened.load_or_generate(ALPHA_SEED) == alpha_system
