import tempfile
from pathlib import Path
from time import perf_counter

import numpy as np
from tabulate import tabulate

from orbits import SeedCodec, SolarSystemDataset, SystemGenerator
from orbits.io import FsStorage, MemoryStorage
from orbits.utils import warnings_as_exceptions

NUM_ITERATIONS = 5
NUM_SEEDS = 500


def generate_seeds(n: int) -> list[str]:
    return [f"benchmark-{i}" for i in range(n)]


def run_codec_benchmark(seeds: list[str]) -> dict[str, float]:
    generator = SystemGenerator()
    codec = SeedCodec()
    timings = {
        "generate": 0.0,
        "encode": 0.0,
        "decode": 0.0,
    }

    for _ in range(NUM_ITERATIONS):
        t0 = perf_counter()
        states = [generator.generate(seed) for seed in seeds]
        timings["generate"] += (perf_counter() - t0) / len(seeds)

        t0 = perf_counter()
        codes = [codec.encode(state) for state in states]
        timings["encode"] += (perf_counter() - t0) / len(seeds)

        t0 = perf_counter()
        for code in codes:
            codec.decode(code)
        timings["decode"] += (perf_counter() - t0) / len(seeds)

    for k in timings:
        timings[k] /= NUM_ITERATIONS

    return timings


def run_storage_benchmark(storage_class, seeds: list[str]) -> dict[str, float]:
    timings = {
        "load_or_generate (miss)": 0.0,
        "load_or_generate (hit)": 0.0,
        "load_system_db": 0.0,
    }

    for _ in range(NUM_ITERATIONS):
        with tempfile.TemporaryDirectory() as tmp:
            if storage_class == FsStorage:
                storage = storage_class(Path(tmp) / "storage")
            else:
                storage = storage_class()
            dataset = SolarSystemDataset(storage=storage)

            t0 = perf_counter()
            for seed in seeds:
                dataset.load_or_generate(seed)
            timings["load_or_generate (miss)"] += (perf_counter() - t0) / len(seeds)

            t0 = perf_counter()
            for seed in seeds:
                dataset.load_or_generate(seed)
            timings["load_or_generate (hit)"] += (perf_counter() - t0) / len(seeds)

            t0 = perf_counter()
            for seed in seeds:
                dataset.load_system_db(seed)
            timings["load_system_db"] += (perf_counter() - t0) / len(seeds)

    for k in timings:
        timings[k] /= NUM_ITERATIONS

    return timings


def collect_benchmark_results(storages: dict[str, type], seeds: list[str]) -> dict[str, dict[str, float]]:
    results = {}
    for name, cls in storages.items():
        print(f"Running benchmark for {name}")
        results[name] = run_storage_benchmark(cls, seeds)

    return results


def display_results(all_results: dict[str, dict[str, float]]) -> None:
    operations = list(next(iter(all_results.values())).keys())
    headers = ["Operation"] + list(all_results.keys())
    table = []
    for op in operations:
        row = [op]
        for storage in all_results:
            val = all_results[storage][op]
            row.append(f"{val:.6f}" if not np.isnan(val) else "")
        table.append(row)
    print("\nResults (seconds per system):")
    print(tabulate(table, headers=headers, tablefmt="github"))


def main():
    seeds = generate_seeds(NUM_SEEDS)

    # Generation and stats must not emit numeric warnings for any seed
    with warnings_as_exceptions([RuntimeWarning]):
        print("Running benchmark for the codec")
        display_results({"SeedCodec": run_codec_benchmark(seeds)})

        storages = {
            "MemoryStorage": MemoryStorage,
            "FsStorage": FsStorage,
        }
        display_results(collect_benchmark_results(storages, seeds))


if __name__ == "__main__":
    main()
