"""
Stereopy - Pure Python stereocenter canonicalization.

A zero-dependency library for normalizing non-tetrahedral stereocenters.
Octahedral centers (``@OH1`` .. ``@OH30``) are reduced to configuration
order 1 using a superpermutation lookup table.

    >>> from stereopy import Octahedral
    >>> center = Octahedral("Co", ["C", "F", "Br", "Cl", "I", "S"], 8)
    >>> center.normalize().order
    1

Submodules:
    stereopy.permutation - Permutation apply/invert/compose
    stereopy.tables      - Superpermutation and class-label tables
"""

__version__ = "0.1.0"

# Stereo elements
from stereopy.stereo import StereoClass, Stereocenter, StereoResult
from stereopy.octahedral import Octahedral, same_configuration

# Permutations
from stereopy.permutation import (
    Permutation,
    apply,
    compose,
    invapply,
    invert,
    parse_permutation,
)

# Exceptions
from stereopy.exceptions import (
    ChemError,
    StereoError,
    InvalidConfigurationOrder,
    InvalidPermutation,
    ClassNotFound,
    TableBuildError,
)

# Submodules
from stereopy import tables

__all__ = [
    # Stereo elements
    "StereoClass", "Stereocenter", "StereoResult",
    "Octahedral", "same_configuration",
    # Permutations
    "Permutation", "apply", "compose", "invapply", "invert", "parse_permutation",
    # Exceptions
    "ChemError", "StereoError", "InvalidConfigurationOrder",
    "InvalidPermutation", "ClassNotFound", "TableBuildError",
    # Submodules
    "tables",
]
