"""
dataset.py — Input Array Container & Generator
===============================================
The array a visualization session sorts.  Engines copy `values` on
construction and never write back, so one Dataset can seed any number
of runs (the comparison mode relies on that).

Responsibilities:
  1. Hold the values plus display metadata  (name, size, min, max)
  2. Generation factory methods             (random, sorted, reversed, …)
  3. Import from free text                  ("5, 3 8 1" → Dataset)
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Values are non-negative ints; the bar renderers scale by max_value.
  - Generators take a `seed` and use a private random.Random so a seeded
    dataset never disturbs (or depends on) the global RNG.
"""

import random
import re
from typing import List, Optional, Tuple

MAX_SIZE      = 200
DEFAULT_SIZE  = 20
DEFAULT_RANGE = (1, 100)

PRESETS = ("random", "sorted", "reversed", "nearly_sorted", "few_unique")


class DatasetError(ValueError):
    """Raised when user-supplied array input cannot be accepted."""


class Dataset:
    """
    Attributes:
        values : The array to sort (list of non-negative ints).
        name   : Human label shown in the UI ("Random (20)", "Custom", …).
    """

    def __init__(self, values: List[int], name: str = "Custom"):
        if len(values) > MAX_SIZE:
            raise DatasetError(f"At most {MAX_SIZE} values are supported (got {len(values)})")
        for v in values:
            if not isinstance(v, int) or isinstance(v, bool) or v < 0:
                raise DatasetError(f"Values must be non-negative integers (got {v!r})")
        self.values: List[int] = list(values)
        self.name:   str       = name

    # ------------------------------------------------------------------
    # Derived metadata
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return len(self.values)

    @property
    def min_value(self) -> int:
        return min(self.values, default=0)

    @property
    def max_value(self) -> int:
        return max(self.values, default=0)

    # ==================================================================
    # GENERATORS
    # ==================================================================
    @classmethod
    def generate_random(
        cls,
        size: int = DEFAULT_SIZE,
        value_range: Tuple[int, int] = DEFAULT_RANGE,
        seed: Optional[int] = None,
    ) -> "Dataset":
        """Uniformly random values in the inclusive `value_range`."""
        low, high = value_range
        if low < 0 or high < low:
            raise DatasetError(f"Invalid value range {value_range}")
        rng = random.Random(seed)
        values = [rng.randint(low, high) for _ in range(size)]
        return cls(values, name=f"Random ({size})")

    @classmethod
    def generate_preset(
        cls,
        kind: str = "random",
        size: int = DEFAULT_SIZE,
        value_range: Tuple[int, int] = DEFAULT_RANGE,
        seed: Optional[int] = None,
    ) -> "Dataset":
        """
        Named input shapes that show off best / worst cases:

            random         – uniform noise
            sorted         – already ascending (bubble / insertion best case)
            reversed       – descending (worst case for most of them)
            nearly_sorted  – ascending with a few adjacent swaps
            few_unique     – only four distinct values (lots of ties)
        """
        if kind not in PRESETS:
            raise DatasetError(f"Unknown preset '{kind}' (choose from {', '.join(PRESETS)})")

        base = cls.generate_random(size, value_range, seed)
        rng = random.Random(seed)
        values = base.values

        if kind == "sorted":
            values.sort()
        elif kind == "reversed":
            values.sort(reverse=True)
        elif kind == "nearly_sorted":
            values.sort()
            for _ in range(max(1, size // 10)):
                if size < 2:
                    break
                i = rng.randrange(size - 1)
                values[i], values[i + 1] = values[i + 1], values[i]
        elif kind == "few_unique":
            low, high = value_range
            pool = sorted({rng.randint(low, high) for _ in range(4)})
            values = [rng.choice(pool) for _ in range(size)]

        label = kind.replace("_", " ").capitalize()
        return cls(values, name=f"{label} ({size})")

    # ---------- Import from text ----------
    @classmethod
    def from_text(cls, text: str, name: str = "Custom") -> "Dataset":
        """
        Parse a list of integers separated by commas and/or whitespace.

            "5, 3, 8, 1"   → [5, 3, 8, 1]
            "5 3 8 1"      → [5, 3, 8, 1]
            "[5,3,8]"      → [5, 3, 8]   (brackets are ignored)
        """
        tokens = [t for t in re.split(r"[\s,;]+", text.strip().strip("[]")) if t]
        values = []
        for token in tokens:
            try:
                values.append(int(token))
            except ValueError:
                raise DatasetError(f"'{token}' is not an integer") from None
        return cls(values, name=name)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {"name": self.name, "values": list(self.values)}

    @classmethod
    def from_dict(cls, data: dict) -> "Dataset":
        return cls(list(data.get("values", [])), name=data.get("name", "Custom"))

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, size={self.size}, range=[{self.min_value}, {self.max_value}])"
