"""Custom exceptions for stereopy."""

from __future__ import annotations


class ChemError(Exception):
    """Base exception for chemistry-related errors."""
    pass


class StereoError(ChemError):
    """Invalid stereo element description."""
    pass


class InvalidConfigurationOrder(StereoError):
    """Configuration order outside the range allowed for the stereo class."""

    def __init__(self, order: object, lo: int = 1, hi: int = 30):
        self.order = order
        self.lo = lo
        self.hi = hi
        super().__init__(
            f"Invalid configuration order: {order!r}, "
            f"should be in range {lo}-{hi}"
        )


class InvalidPermutation(StereoError):
    """Permutation is not a bijection on 1..n, or does not fit its input."""

    def __init__(self, message: str, permutation: object = None):
        self.permutation = permutation
        if permutation is not None:
            super().__init__(f"{message}: {permutation!r}")
        else:
            super().__init__(message)


class ClassNotFound(StereoError):
    """No labelled window exists for a configuration class.

    Raised only when the class-label table is inconsistent with the
    superpermutation. Callers should not recover from it.
    """

    def __init__(self, class_id: object):
        self.class_id = class_id
        super().__init__(f"No labelled window for configuration class {class_id!r}")


class TableBuildError(StereoError):
    """Permutation table data violates a build-time invariant."""

    def __init__(self, message: str, position: int | None = None):
        self.position = position
        if position is not None:
            super().__init__(f"{message} (window {position})")
        else:
            super().__init__(message)
