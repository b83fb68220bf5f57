"""
Superpermutation lookup tables.

A superpermutation contains every permutation of ``1..n`` as a window of
``n`` consecutive digits. A parallel label string marks which configuration
class each window belongs to. The representative permutation for a class is
the window at the first labelled position, so one short string stands in for
a full class-to-permutation table.
"""

from __future__ import annotations

from dataclasses import dataclass

from stereopy.exceptions import ClassNotFound, TableBuildError
from stereopy.permutation import DEFAULT_DEGREE
from stereopy.tables.octahedral import (
    OH_CLASS_IDS,
    OH_CLASS_LABELS,
    OH_SUPERPERM,
    UNASSIGNED,
)


@dataclass(frozen=True, slots=True)
class SuperpermTable:
    """Superpermutation plus class labels for one stereo class.

    Attributes:
        superperm: Digits ``1..width``; every permutation occurs as a window.
        labels: One marker per window start, ``len(superperm) - width + 1``.
        class_ids: Marker for class 1, class 2, ... in order.
        width: Permutation degree (window size).
    """

    superperm: str
    labels: str
    class_ids: str
    width: int = DEFAULT_DEGREE

    def __post_init__(self) -> None:
        expected = len(self.superperm) - self.width + 1
        if len(self.labels) != expected:
            raise TableBuildError(
                f"Label string has length {len(self.labels)}, expected {expected}"
            )
        if UNASSIGNED in self.class_ids or len(set(self.class_ids)) != len(self.class_ids):
            raise TableBuildError("Class markers must be distinct and not blank")

    @property
    def num_classes(self) -> int:
        return len(self.class_ids)

    def marker(self, class_id: int) -> str:
        """Get the label character for a 1-based class id."""
        if (
            isinstance(class_id, bool)
            or not isinstance(class_id, int)
            or not 1 <= class_id <= len(self.class_ids)
        ):
            raise ClassNotFound(class_id)
        return self.class_ids[class_id - 1]

    def first_position(self, class_id: int) -> int:
        """Index of the first window labelled with ``class_id``."""
        idx = self.labels.find(self.marker(class_id))
        if idx < 0:
            raise ClassNotFound(class_id)
        return idx

    def representative_window(self, class_id: int) -> str:
        """Get the representative permutation string for a class.

        Args:
            class_id: 1-based configuration class.

        Returns:
            The ``width`` digits of the superpermutation at the first
            position labelled with this class.

        Raises:
            ClassNotFound: If no window carries the class marker.
        """
        idx = self.first_position(class_id)
        return self.superperm[idx:idx + self.width]

    def class_at(self, position: int) -> int | None:
        """Class id labelled at a window start, or None if unassigned.

        Raises:
            IndexError: If ``position`` is not a window start.
        """
        if not 0 <= position < len(self.labels):
            raise IndexError(f"Window position {position} out of range")
        label = self.labels[position]
        if label == UNASSIGNED:
            return None
        return self.class_ids.index(label) + 1


_OCTAHEDRAL: SuperpermTable | None = None


def octahedral_table() -> SuperpermTable:
    """Get the shared octahedral (``@OH1``..``@OH30``) lookup table."""
    global _OCTAHEDRAL
    if _OCTAHEDRAL is None:
        _OCTAHEDRAL = SuperpermTable(OH_SUPERPERM, OH_CLASS_LABELS, OH_CLASS_IDS)
    return _OCTAHEDRAL
