"""
Class-label table generation.

Builds the label string that sits alongside a superpermutation. Each
permutation of every class orbit is located in the superpermutation, and
its window start is marked with the class marker. The output is written
back into :mod:`stereopy.tables.octahedral` as literal data, so the runtime
never repeats this work.

Usage::

    python -m stereopy.tables.builder           # print literal source
    python -m stereopy.tables.builder --check   # verify embedded tables
"""

from __future__ import annotations

import sys
import warnings
from itertools import permutations
from typing import Iterator, Sequence

from stereopy.exceptions import InvalidPermutation, TableBuildError
from stereopy.permutation import DEFAULT_DEGREE, DIGITS, parse_permutation
from stereopy.tables.octahedral import (
    OH_CLASS_IDS,
    OH_CLASS_LABELS,
    OH_ORBITS,
    OH_SUPERPERM,
    UNASSIGNED,
)

LINE_WIDTH = 60


def superperm_symbols(superperm: str, size: int = DEFAULT_DEGREE) -> list[int]:
    """Convert a superpermutation string into single-digit symbols.

    Raises:
        TableBuildError: If a character is not a digit in ``1..size``.
    """
    allowed = DIGITS[:size]
    symbols = []
    for i, ch in enumerate(superperm):
        if ch not in allowed:
            raise TableBuildError(f"Invalid superpermutation symbol {ch!r}", i)
        symbols.append(int(ch))
    if len(symbols) < size:
        raise TableBuildError(f"Superpermutation shorter than {size} symbols")
    return symbols


def find_windows(symbols: Sequence[int], perm: Sequence[int]) -> Iterator[int]:
    """Yield every window start where ``perm`` occurs in ``symbols``."""
    width = len(perm)
    for i in range(len(symbols) - width + 1):
        for j in range(width):
            if symbols[i + j] != perm[j]:
                break
        else:
            yield i


def check_orbits(orbits: Sequence[Sequence[str]], size: int = DEFAULT_DEGREE) -> None:
    """Check that class orbits partition the permutations of ``1..size``.

    Every orbit must have the same number of members, no permutation may
    belong to two orbits, and together they must cover all ``size!``
    permutations.

    Raises:
        TableBuildError: On any violation.
    """
    if not orbits:
        raise TableBuildError("No class orbits given")

    orbit_size = len(orbits[0])
    owner: dict[tuple[int, ...], int] = {}
    for class_idx, orbit in enumerate(orbits):
        if len(orbit) != orbit_size:
            raise TableBuildError(
                f"Orbit of class {class_idx + 1} has {len(orbit)} members, "
                f"expected {orbit_size}"
            )
        for text in orbit:
            try:
                perm = parse_permutation(text, size)
            except InvalidPermutation as e:
                raise TableBuildError(f"Class {class_idx + 1}: {e}") from e
            if perm in owner:
                raise TableBuildError(
                    f"Permutation {text} is in the orbits of classes "
                    f"{owner[perm] + 1} and {class_idx + 1}"
                )
            owner[perm] = class_idx

    missing = [p for p in permutations(range(1, size + 1)) if p not in owner]
    if missing:
        first = "".join(str(s) for s in missing[0])
        raise TableBuildError(
            f"{len(missing)} permutations are not in any orbit (e.g. {first})"
        )


def build_class_labels(
    superperm: str,
    orbits: Sequence[Sequence[str]],
    class_ids: str,
    unassigned: str = UNASSIGNED,
) -> str:
    """Label every superpermutation window with the class it belongs to.

    Args:
        superperm: Superpermutation digits.
        orbits: For each class in order, its orbit as numeral strings.
        class_ids: Marker character for each class, same order as ``orbits``.
        unassigned: Marker for windows that match no orbit permutation.

    Returns:
        Label string of length ``len(superperm) - width + 1``.

    Raises:
        TableBuildError: If a window would get two different classes, if an
            orbit permutation never occurs, or on malformed input.
    """
    if len(orbits) != len(class_ids):
        raise TableBuildError(
            f"{len(orbits)} orbits but {len(class_ids)} class markers"
        )
    if not orbits or not orbits[0]:
        raise TableBuildError("No class orbits given")

    width = len(orbits[0][0])
    symbols = superperm_symbols(superperm, width)
    labels: list[int | None] = [None] * (len(symbols) - width + 1)

    for class_idx, orbit in enumerate(orbits):
        for text in orbit:
            try:
                perm = parse_permutation(text, width)
            except InvalidPermutation as e:
                raise TableBuildError(f"Class {class_idx + 1}: {e}") from e

            hits = 0
            for i in find_windows(symbols, perm):
                if labels[i] is not None and labels[i] != class_idx:
                    raise TableBuildError(
                        f"Window {text} matches classes {labels[i] + 1} "
                        f"and {class_idx + 1}", i
                    )
                labels[i] = class_idx
                hits += 1

            if hits == 0:
                raise TableBuildError(
                    f"Permutation {text} of class {class_idx + 1} "
                    f"does not occur in the superpermutation"
                )
            if hits > 1:
                warnings.warn(
                    f"Permutation {text} occurs {hits} times; only the first "
                    f"labelled occurrence of class {class_idx + 1} is read"
                )

    return "".join(unassigned if c is None else class_ids[c] for c in labels)


def build_octahedral_assets() -> tuple[str, str]:
    """Build the octahedral superpermutation and label string.

    Returns:
        Tuple of (superpermutation, labels).
    """
    check_orbits(OH_ORBITS)
    labels = build_class_labels(OH_SUPERPERM, OH_ORBITS, OH_CLASS_IDS)
    return OH_SUPERPERM, labels


def _literal(name: str, text: str) -> str:
    lines = [f'    "{text[i:i + LINE_WIDTH]}"' for i in range(0, len(text), LINE_WIDTH)]
    return f"{name}: Final[str] = (\n" + "\n".join(lines) + "\n)\n"


def format_assets(superperm: str, labels: str) -> str:
    """Render the assets as Python source for the tables module."""
    return (
        _literal("OH_SUPERPERM", superperm)
        + "\n"
        + _literal("OH_CLASS_LABELS", labels)
    )


def main() -> int:
    superperm, labels = build_octahedral_assets()

    if "--check" in sys.argv or "-c" in sys.argv:
        if labels != OH_CLASS_LABELS:
            print("OH_CLASS_LABELS is out of date; regenerate the tables module")
            return 1
        print(f"OK: {len(labels) - labels.count(UNASSIGNED)} of {len(labels)} windows labelled")
        return 0

    print(format_assets(superperm, labels), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
