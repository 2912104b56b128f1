from enum import Enum


# ---------------------------------------------------------------------------
# Element State Enum: maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class ElementState(Enum):
    NORMAL          = "normal"           # default cyan bar
    COMPARING       = "comparing"        # magenta: two values being compared
    SWAPPING        = "swapping"         # red: values being moved / exchanged
    CURRENT         = "current"          # yellow: quick-sort pivot, insertion key
    SELECTED        = "selected"         # white: slot the key was just written to
    PARTITION_LEFT  = "partition_left"   # blue: left scan pointer
    PARTITION_RIGHT = "partition_right"  # orange: right scan pointer
    SORTED          = "sorted"           # green: in its final position

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    ElementState.NORMAL:          "Normal",
    ElementState.COMPARING:       "Comparing",
    ElementState.SWAPPING:        "Swapping",
    ElementState.CURRENT:         "Pivot / Key",
    ElementState.SELECTED:        "Inserted",
    ElementState.PARTITION_LEFT:  "Left Ptr",
    ElementState.PARTITION_RIGHT: "Right Ptr",
    ElementState.SORTED:          "Sorted",
}


def clear_transient(states) -> None:
    """Reset every non-SORTED tag to NORMAL, in place."""
    for i, s in enumerate(states):
        if s is not ElementState.SORTED:
            states[i] = ElementState.NORMAL
