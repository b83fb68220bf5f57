"""Permutation lookup tables for non-tetrahedral stereo."""

from stereopy.tables.superperm import SuperpermTable, octahedral_table
from stereopy.tables.octahedral import (
    OH_CLASS_IDS,
    OH_CLASS_LABELS,
    OH_ORBITS,
    OH_SUPERPERM,
    UNASSIGNED,
)

__all__ = [
    "SuperpermTable",
    "octahedral_table",
    "OH_CLASS_IDS",
    "OH_CLASS_LABELS",
    "OH_ORBITS",
    "OH_SUPERPERM",
    "UNASSIGNED",
]
