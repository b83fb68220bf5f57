"""
Octahedral stereocenters.

An octahedral center has a focus atom and six carriers. The carrier
ordering is read with one of the 30 configuration orders ``@OH1`` ..
``@OH30`` used by OpenSMILES, so 720 carrier orderings describe 30 classes
of 24 each.

Normalizing reorders the carriers so the configuration order is 1. For
example ``C[Co@OH8](F)(Br)(Cl)(I)S`` is the same center as
``C[Co@OH1](F)(Cl)(Br)(I)S``. In the normalized form the first and last
carriers form an axis, and the middle four equatorial carriers run
anti-clockwise looking from the first carrier::

         c
         | a
         |/
     d---x---b        a: first carrier, b: second carrier, ...
        /|            x: focus
       f |            'a' is in front of 'x', 'f' is behind
         e

    >>> center = Octahedral("Co", ["C", "F", "Br", "Cl", "I", "S"], 8)
    >>> center.normalize().order
    1
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Final, Mapping, Sequence

from stereopy.exceptions import InvalidConfigurationOrder, StereoError
from stereopy.permutation import invapply
from stereopy.stereo import StereoClass, StereoResult
from stereopy.tables.octahedral import OH_ORBITS
from stereopy.tables.superperm import octahedral_table

NUM_CARRIERS: Final[int] = StereoClass.OCTAHEDRAL.num_carriers
MAX_ORDER: Final[int] = StereoClass.OCTAHEDRAL.max_order


def _check_order(order: object) -> int:
    if isinstance(order, bool):
        raise InvalidConfigurationOrder(order, 1, MAX_ORDER)
    try:
        value = operator.index(order)
    except TypeError:
        raise InvalidConfigurationOrder(order, 1, MAX_ORDER) from None
    if not 1 <= value <= MAX_ORDER:
        raise InvalidConfigurationOrder(order, 1, MAX_ORDER)
    return value


@dataclass(frozen=True, slots=True)
class Octahedral:
    """Octahedral configuration of a focus atom and six carriers.

    Carriers are positional: swapping two of them changes the described
    configuration. Instances are immutable.

    Attributes:
        focus: The central atom.
        carriers: The six neighbours, in the order the configuration is read.
        order: Configuration order 1-30 (``@OH1`` .. ``@OH30``).

    Raises:
        InvalidConfigurationOrder: If ``order`` is not in 1-30.
        StereoError: If there are not exactly six carriers.
    """

    focus: Any
    carriers: tuple[Any, ...]
    order: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "order", _check_order(self.order))
        carriers = tuple(self.carriers)
        if len(carriers) != NUM_CARRIERS:
            raise StereoError(
                f"Octahedral stereo requires {NUM_CARRIERS} carriers, got {len(carriers)}"
            )
        object.__setattr__(self, "carriers", carriers)

    @classmethod
    def create(
        cls,
        focus: Any,
        carriers: Sequence[Any],
        order: int,
    ) -> StereoResult["Octahedral"]:
        """Construct without raising on invalid input.

        Returns:
            A result holding the new center, or the StereoError that
            prevented construction.
        """
        try:
            return StereoResult.success(cls(focus, tuple(carriers), order))
        except StereoError as e:
            return StereoResult.failure(e)

    @property
    def config_class(self) -> StereoClass:
        return StereoClass.OCTAHEDRAL

    @property
    def is_normalized(self) -> bool:
        return self.order == 1

    def normalize(self) -> "Octahedral":
        """Get the equivalent center with configuration order 1.

        The carriers are reordered by undoing the representative
        permutation of the current configuration class. A center that
        is already order 1 is returned unchanged.

        Returns:
            The normalized center. The focus and the set of carriers are
            the same; only the carrier order changes.

        Raises:
            InvalidConfigurationOrder: If the order is not in 1-30.
        """
        if self.order == 1:
            return self
        order = _check_order(self.order)
        window = octahedral_table().representative_window(order)
        return Octahedral(self.focus, tuple(invapply(self.carriers, window)), 1)

    def try_normalize(self) -> StereoResult["Octahedral"]:
        """Normalize without raising on an invalid configuration order.

        Table inconsistencies (``ClassNotFound``) still propagate.
        """
        try:
            return StereoResult.success(self.normalize())
        except InvalidConfigurationOrder as e:
            return StereoResult.failure(e)

    def contains(self, atom: Any) -> bool:
        """Check if an atom is the focus or one of the carriers."""
        return atom == self.focus or atom in self.carriers

    def map(self, atoms: Mapping[Any, Any]) -> "Octahedral":
        """Get a copy with atoms replaced through ``atoms``.

        Atoms missing from the mapping are kept. The configuration order
        is unchanged.
        """
        return Octahedral(
            atoms.get(self.focus, self.focus),
            tuple(atoms.get(a, a) for a in self.carriers),
            self.order,
        )

    def rotations(self) -> list[tuple[Any, ...]]:
        """All 24 carrier orderings that describe this center at order 1."""
        carriers = self.normalize().carriers
        return [tuple(invapply(carriers, perm)) for perm in OH_ORBITS[0]]


def same_configuration(a: Octahedral, b: Octahedral) -> bool:
    """Check if two octahedral centers describe the same arrangement.

    Both centers must have the same focus. The orders may differ: both
    are normalized, then compared up to a rotation of the octahedron.
    """
    if a.focus != b.focus:
        return False
    return b.normalize().carriers in a.rotations()
