"""
Test data generators for jtree benchmarks.

Creates JSON documents of different shapes:
- strict documents every library can read (small/large/mixed/nested/strings)
- lenient documents only jtree accepts (bare words, single quotes,
  trailing commas, elided elements)
- Python data for the writer benchmarks
"""

import json
import random
import string
from typing import Any

# Seeded so benchmark runs are comparable
_RNG = random.Random(20240115)

_ESCAPE_PROBABILITY = 0.3
_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t"]

STRICT_DATA_TYPES = [
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
]


def generate_test_data(data_type: str) -> str:
    """Generates strict JSON text of the given shape."""
    return json.dumps(generate_python_data(data_type))


def generate_python_data(data_type: str) -> Any:
    """Generates the Python data behind a strict document."""
    generators = {
        "small_object": _small_object,
        "large_object": _large_object,
        "mixed_array": _mixed_array,
        "nested_structure": _nested_structure,
        "string_heavy": _string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type]()


def generate_lenient_data(rows: int = 200) -> str:
    """
    Generates a config-style document using the lenient extensions.

    Keys are bare words, strings are single-quoted or bare, and arrays carry
    trailing commas and elided elements.
    """
    lines = ["{"]
    for i in range(rows):
        name = _random_string(8)
        tags = ", ".join(_random_string(5) for _ in range(3))
        lines.append(
            f"  row_{i}: {{id: {i}, name: '{name}', enabled: TRUE,"
            f" ratio: {_RNG.uniform(0, 1):.4f}, tags: [{tags},,],}};"
        )
    lines.append("}")
    return "\n".join(lines)


def _small_object() -> dict[str, Any]:
    """A small object (< 1KB) with basic key-value pairs."""
    return {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }


def _timestamp() -> str:
    month = _RNG.randint(1, 12)
    day = _RNG.randint(1, 28)
    hour = _RNG.randint(0, 23)
    minute = _RNG.randint(0, 59)
    return f"2024-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:00Z"


def _large_object() -> dict[str, Any]:
    """A large object (> 10KB) with nested records."""
    return {
        "user_id": _RNG.randint(1000000, 9999999),
        "profile": {
            "first_name": _random_string(10),
            "last_name": _random_string(12),
            "email": f"{_random_string(8)}@{_random_string(6)}.com",
            "address": {
                "street": f"{_RNG.randint(1, 9999)} {_random_string(8)} St",
                "city": _random_string(12),
                "zip": f"{_RNG.randint(10000, 99999)}",
                "country": "US",
            },
            "notifications": {
                "email": _RNG.choice([True, False]),
                "sms": _RNG.choice([True, False]),
            },
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(_RNG.uniform(1.0, 1000.0), 2),
                "currency": _RNG.choice(["USD", "EUR", "GBP", "JPY"]),
                "timestamp": _timestamp(),
                "description": f"Payment for {_random_string(20)}",
                "status": _RNG.choice(["completed", "pending", "failed"]),
            }
            for i in range(50)
        ],
        "activity_log": [
            {
                "timestamp": _timestamp(),
                "action": _RNG.choice(["login", "logout", "purchase"]),
                "user_agent": f"Mozilla/5.0 ({_random_string(20)})",
            }
            for _ in range(30)
        ],
    }


def _mixed_array() -> list[Any]:
    """A 200 element array of mixed scalar and object values."""
    makers = [
        lambda i: _RNG.randint(-1000, 1000),
        lambda i: round(_RNG.uniform(-100.0, 100.0), 3),
        lambda i: _random_string(_RNG.randint(5, 30)),
        lambda i: _RNG.choice([True, False]),
        lambda i: None,
        lambda i: {"index": i, "value": _random_string(10)},
    ]
    return [_RNG.choice(makers)(i) for i in range(200)]


def _nested_structure(depth: int = 6) -> dict[str, Any]:
    """A tree nested depth levels deep with three children per level."""
    if depth <= 0:
        return {"value": _random_string(10)}
    return {
        "level": depth,
        "data": _random_string(15),
        "items": [_nested_structure(depth - 1) for _ in range(3)],
    }


def _escaped_string() -> str:
    """A 50 character string mixing letters and escape sequences."""
    chars = []
    for _ in range(50):
        if _RNG.random() < _ESCAPE_PROBABILITY:
            chars.append(json.loads(f'"{_RNG.choice(_ESCAPES)}"'))
        else:
            chars.append(_RNG.choice(string.ascii_letters + " "))
    return "".join(chars)


def _string_heavy() -> dict[str, Any]:
    """An object dominated by strings that need escaping."""
    return {
        "strings": [_escaped_string() for _ in range(100)],
        "unicode": [chr(_RNG.randint(0x00A0, 0x2FFF)) * 5 for _ in range(50)],
        "paths": {
            f"key_{i}": f"C:\\Users\\{_random_string(8)}\\file_{i}.txt"
            for i in range(20)
        },
    }


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(_RNG.choices(string.ascii_letters, k=length))
