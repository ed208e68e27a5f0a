"""
Memory usage benchmarks for JSON parsing.

Measures peak memory while parsing across libraries. jtree keeps every
value inside JSONArray / JSONObject wrappers, so its peak is expected to
sit above the plain dict/list decoders.
"""

import json
import tracemalloc
from collections.abc import Callable
from typing import Any

import orjson
import pytest
import ujson  # type: ignore[import-untyped]

import jtree
from benchmarks.data_generators import STRICT_DATA_TYPES
from benchmarks.data_generators import generate_test_data

LIBRARIES: dict[str, Callable[[str], Any]] = {
    "stdlib_json": json.loads,
    "orjson": lambda text: orjson.loads(text.encode("utf-8")),
    "ujson": ujson.loads,
    "jtree": jtree.loads,
}


def measure_memory_usage(func: Any, *args: Any) -> tuple[Any, int]:
    """
    Measures peak memory usage during function execution.

    Returns:
        Tuple of (function_result, peak_memory_bytes)
    """
    tracemalloc.start()
    try:
        result = func(*args)
        _, peak = tracemalloc.get_traced_memory()
        return result, peak
    finally:
        tracemalloc.stop()


class TestMemoryUsage:
    """Memory usage benchmarks for JSON parsing."""

    @pytest.mark.parametrize("data_type", STRICT_DATA_TYPES)
    @pytest.mark.parametrize("library", list(LIBRARIES))
    def test_parse_memory(self, library: str, data_type: str) -> None:
        """Measures peak memory of one library on one document shape."""
        test_data = generate_test_data(data_type)
        result, peak_memory = measure_memory_usage(
            LIBRARIES[library], test_data
        )

        print(f"\n{library} {data_type}: {peak_memory:,} bytes")
        assert result is not None

    def test_memory_comparison_summary(self) -> None:
        """Prints peak memory per library relative to stdlib json."""
        results: dict[str, dict[str, int]] = {}
        for data_type in STRICT_DATA_TYPES:
            test_data = generate_test_data(data_type)
            results[data_type] = {
                name: measure_memory_usage(func, test_data)[1]
                for name, func in LIBRARIES.items()
            }

        header = " ".join(f"{name:<12}" for name in LIBRARIES)
        print("\n" + "=" * 72)
        print("MEMORY USAGE COMPARISON (bytes)")
        print("=" * 72)
        print(f"{'Data Type':<20} {header}")
        print("-" * 72)
        for data_type, measurements in results.items():
            row = " ".join(f"{value:<12,}" for value in measurements.values())
            print(f"{data_type:<20} {row}")

        print("\nMEMORY EFFICIENCY vs stdlib_json")
        print("-" * 40)
        for data_type, measurements in results.items():
            baseline = measurements["stdlib_json"]
            ratios = " ".join(
                f"{name}={value / baseline:.2f}x"
                for name, value in measurements.items()
                if name != "stdlib_json"
            )
            print(f"{data_type}: {ratios}")

        assert len(results) == len(STRICT_DATA_TYPES)
