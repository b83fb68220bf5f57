"""
Permutation algebra for stereo carrier lists.

A permutation of degree n is a tuple of the symbols ``1..n``. It is read as
"the element in slot k moves to slot ``perm[k]``", so applying ``(2, 3, 1)``
to ``"abc"`` gives ``"cab"``. The same primitives serve every stereo class.
The octahedral tables use degree 6.

    >>> apply((2, 3, 1), "abc")
    ['c', 'a', 'b']
    >>> invapply(["c", "a", "b"], "231")
    ['a', 'b', 'c']
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Sequence, TypeVar, Union

from stereopy.exceptions import InvalidPermutation

T = TypeVar("T")

DEFAULT_DEGREE: Final[int] = 6
DIGITS: Final[str] = "123456789"

PermutationLike = Union["Permutation", Sequence[int], str]


def parse_permutation(text: str, size: int = DEFAULT_DEGREE) -> tuple[int, ...]:
    """Parse a numeral string such as ``"513624"`` into a permutation.

    Args:
        text: One digit per slot, each in ``1..size``.
        size: Expected degree.

    Returns:
        The permutation as a tuple of ints.

    Raises:
        InvalidPermutation: If the string is not a bijection on ``1..size``.
    """
    if not text or any(ch not in DIGITS for ch in text):
        raise InvalidPermutation("Permutation string must contain only digits 1-9", text)
    return check_permutation([int(ch) for ch in text], size)


def check_permutation(perm: Sequence[int], size: int = DEFAULT_DEGREE) -> tuple[int, ...]:
    """Validate that ``perm`` is a bijection on ``1..size``.

    Returns:
        The permutation as a tuple.

    Raises:
        InvalidPermutation: On wrong length, out-of-range or repeated symbols.
    """
    perm = tuple(perm)
    if len(perm) != size:
        raise InvalidPermutation(f"Expected permutation of length {size}", perm)
    if sorted(perm) != list(range(1, size + 1)):
        raise InvalidPermutation(f"Not a bijection on 1..{size}", perm)
    return perm


def _as_tuple(perm: PermutationLike, size: int | None) -> tuple[int, ...]:
    if isinstance(perm, Permutation):
        symbols = perm.symbols
        if size is not None and len(symbols) != size:
            raise InvalidPermutation(f"Expected permutation of length {size}", symbols)
        return symbols
    if isinstance(perm, str):
        return parse_permutation(perm, len(perm) if size is None else size)
    return check_permutation(perm, len(perm) if size is None else size)


def apply(perm: PermutationLike, sequence: Sequence[T]) -> list[T]:
    """Reorder ``sequence`` by ``perm``.

    Element ``sequence[k]`` is placed at position ``perm[k] - 1``.

    Raises:
        InvalidPermutation: If ``perm`` is malformed, or its degree does
            not match the sequence length.
    """
    p = _as_tuple(perm, None)
    if len(sequence) != len(p):
        raise InvalidPermutation(
            f"Cannot apply permutation of degree {len(p)} to "
            f"{len(sequence)} elements", p
        )
    out: list[T] = [None] * len(p)  # type: ignore[list-item]
    for k, dst in enumerate(p):
        out[dst - 1] = sequence[k]
    return out


def invert(perm: PermutationLike) -> tuple[int, ...]:
    """Return the inverse permutation, ``inv[perm[k] - 1] = k + 1``."""
    p = _as_tuple(perm, None)
    inv = [0] * len(p)
    for k, dst in enumerate(p):
        inv[dst - 1] = k + 1
    return tuple(inv)


def compose(p: PermutationLike, q: PermutationLike) -> tuple[int, ...]:
    """Compose two permutations so ``apply(compose(p, q), x) == apply(p, apply(q, x))``."""
    a = _as_tuple(p, None)
    b = _as_tuple(q, len(a))
    return tuple(a[b[k] - 1] for k in range(len(a)))


def invapply(sequence: Sequence[T], perm: PermutationLike) -> list[T]:
    """Undo ``perm`` on ``sequence``.

    The permutation is usually given as a numeral string taken straight
    from a lookup table. The result satisfies
    ``out[k] == sequence[perm[k] - 1]``.
    """
    return apply(invert(perm), sequence)


@dataclass(frozen=True, slots=True)
class Permutation:
    """Immutable permutation value.

    Attributes:
        symbols: Tuple of the symbols ``1..n`` in slot order.
    """

    symbols: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "symbols", check_permutation(self.symbols, len(self.symbols))
        )

    @classmethod
    def from_string(cls, text: str) -> "Permutation":
        """Build from a numeral string such as ``"123456"``."""
        return cls(parse_permutation(text, len(text)))

    @classmethod
    def identity(cls, size: int = DEFAULT_DEGREE) -> "Permutation":
        return cls(tuple(range(1, size + 1)))

    @property
    def degree(self) -> int:
        return len(self.symbols)

    @property
    def is_identity(self) -> bool:
        return all(s == k + 1 for k, s in enumerate(self.symbols))

    def inverse(self) -> "Permutation":
        return Permutation(invert(self.symbols))

    def compose(self, other: PermutationLike) -> "Permutation":
        return Permutation(compose(self.symbols, other))

    def apply(self, sequence: Sequence[T]) -> list[T]:
        return apply(self.symbols, sequence)

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self):
        return iter(self.symbols)

    def __str__(self) -> str:
        return "".join(str(s) for s in self.symbols)
