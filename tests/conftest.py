"""Test configuration and fixtures for stereopy tests."""

import pytest

from stereopy import Octahedral
from stereopy.tables import OH_ORBITS


def octahedral_from_smiles(smiles: str) -> Octahedral:
    """Read the first octahedral center of a SMILES string with RDKit.

    Atoms are identified by element symbol, so the SMILES should not
    repeat an element around the center.

    Args:
        smiles: SMILES string with an ``@OHn`` center.

    Returns:
        The center, with carriers in RDKit bond order.
    """
    from rdkit import Chem

    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"RDKit could not parse: {smiles}")
    for atom in mol.GetAtoms():
        if atom.GetChiralTag() == Chem.ChiralType.CHI_OCTAHEDRAL:
            order = atom.GetUnsignedProp("_chiralPermutation")
            carriers = [
                mol.GetAtomWithIdx(b.GetOtherAtomIdx(atom.GetIdx())).GetSymbol()
                for b in atom.GetBonds()
            ]
            return Octahedral(atom.GetSymbol(), carriers, order)
    raise ValueError(f"No octahedral center in: {smiles}")


@pytest.fixture
def carriers() -> list[str]:
    """Six distinct carriers around a cobalt focus."""
    return ["C", "F", "Br", "Cl", "I", "S"]


@pytest.fixture
def rotations() -> tuple[str, ...]:
    """The 24 rotations of the octahedron (the ``@OH1`` orbit)."""
    return OH_ORBITS[0]


@pytest.fixture
def all_classes() -> list[int]:
    """Every octahedral configuration order."""
    return list(range(1, 31))
