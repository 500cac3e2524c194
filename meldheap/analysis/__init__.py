from .shape import check_invariants, describe, height, right_spine_length, spine_bound

__all__ = [
    "check_invariants",
    "describe",
    "height",
    "right_spine_length",
    "spine_bound",
]
