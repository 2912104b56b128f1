"""
dataset/
--------
Core data layer.  Public API:

    from dataset import Dataset, DatasetError
    from dataset import ElementState
"""

from dataset.element import ElementState, clear_transient
from dataset.dataset import Dataset, DatasetError, PRESETS, MAX_SIZE

__all__ = [
    "ElementState", "clear_transient",
    "Dataset",      "DatasetError",
    "PRESETS",      "MAX_SIZE",
]
