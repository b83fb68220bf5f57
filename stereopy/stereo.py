"""
Stereo element kinds and the shared stereocenter interface.

Generic stereo code dispatches on :class:`StereoClass` and talks to any
stereocenter through the :class:`Stereocenter` protocol. Operations that
can fail on bad input also have result-returning variants that give a
:class:`StereoResult` instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final, Generic, Hashable, Protocol, Sequence, TypeVar, runtime_checkable

from stereopy.exceptions import StereoError

T = TypeVar("T")


class StereoClass(IntEnum):
    """Stereo element kind (capability marker)."""

    TETRAHEDRAL = 1
    SQUARE_PLANAR = 2
    TRIGONAL_BIPYRAMIDAL = 3
    OCTAHEDRAL = 4

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def num_carriers(self) -> int:
        return CARRIER_COUNTS[self]

    @property
    def max_order(self) -> int:
        """Number of configuration classes (``@TH1``.., ``@SP1``.., ...)."""
        return CONFIG_ORDERS[self]


CARRIER_COUNTS: Final[dict[StereoClass, int]] = {
    StereoClass.TETRAHEDRAL: 4,
    StereoClass.SQUARE_PLANAR: 4,
    StereoClass.TRIGONAL_BIPYRAMIDAL: 5,
    StereoClass.OCTAHEDRAL: 6,
}

CONFIG_ORDERS: Final[dict[StereoClass, int]] = {
    StereoClass.TETRAHEDRAL: 2,
    StereoClass.SQUARE_PLANAR: 3,
    StereoClass.TRIGONAL_BIPYRAMIDAL: 20,
    StereoClass.OCTAHEDRAL: 30,
}


@runtime_checkable
class Stereocenter(Protocol):
    """Protocol for stereocenters described by a focus and ordered carriers."""

    @property
    def focus(self) -> Hashable:
        ...

    @property
    def carriers(self) -> Sequence[Hashable]:
        ...

    @property
    def order(self) -> int:
        ...

    @property
    def config_class(self) -> StereoClass:
        ...

    def normalize(self) -> "Stereocenter":
        """Return the equivalent stereocenter with configuration order 1."""
        ...


@dataclass(frozen=True)
class StereoResult(Generic[T]):
    """Outcome of a stereo operation: a value or the error that prevented it.

    Attributes:
        value: Result on success, None on failure.
        error: The error on failure, None on success.
    """

    value: T | None = None
    error: StereoError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Get the value, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        return default if self.error is not None else self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> "StereoResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: StereoError) -> "StereoResult[T]":
        return cls(error=error)
