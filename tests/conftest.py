"""Shared fixtures for building small structures."""

import itertools

import pytest

from surfpatch.core.domain.models.atom import PatchAtom
from surfpatch.core.domain.models.structure import PatchStructure


def pdb_line(serial, name, resname, chain, resnum, x, y, z, occupancy, bfactor,
             element, icode=" ", record="ATOM"):
    """Format one fixed-column ATOM/HETATM record."""
    atom_name = name if len(name) == 4 else f" {name:<3s}"
    return (
        f"{record:<6s}{serial:5d} {atom_name} {resname:>3s} {chain}{resnum:4d}{icode}   "
        f"{x:8.3f}{y:8.3f}{z:8.3f}{occupancy:6.2f}{bfactor:6.2f}          {element:>2s}"
    )


@pytest.fixture
def make_atom():
    """Factory for PatchAtom objects with sensible defaults."""
    serials = itertools.count(1)

    def _make(x, y=0.0, z=0.0, residue_id=1, chain_id="A", atom_name="CA",
              accessibility=10.0, radius=1.0, insertion_code=""):
        return PatchAtom(
            atom_id=next(serials),
            atom_name=atom_name,
            coordinates=(float(x), float(y), float(z)),
            residue_name="ALA",
            residue_id=residue_id,
            chain_id=chain_id,
            insertion_code=insertion_code,
            element=atom_name[0],
            accessibility=accessibility,
            radius=radius,
        )

    return _make


@pytest.fixture
def make_structure():
    def _make(atoms):
        return PatchStructure(list(atoms), name="test")

    return _make


@pytest.fixture
def write_pdb():
    """Write rows of (name, resname, chain, resnum, x, y, z, occ, b) to a PDB file."""

    def _write(path, rows):
        lines = []
        for serial, row in enumerate(rows, start=1):
            name, resname, chain, resnum, x, y, z, occupancy, bfactor = row[:9]
            icode = row[9] if len(row) > 9 else " "
            lines.append(
                pdb_line(serial, name, resname, chain, resnum, x, y, z,
                         occupancy, bfactor, name[0], icode=icode)
            )
        lines.append("END")
        path.write_text("\n".join(lines) + "\n")
        return path

    return _write


@pytest.fixture
def three_residue_rows():
    """
    Two touching residues near the origin and one far away.

    Radii (occupancy) are 1.0 and accessibility (B-value) is 10.0 throughout.
    """
    return [
        ("N", "ALA", "A", 1, 0.0, 0.0, 0.0, 1.0, 10.0),
        ("CA", "ALA", "A", 1, 1.5, 0.0, 0.0, 1.0, 10.0),
        ("N", "GLY", "A", 2, 3.0, 0.0, 0.0, 1.0, 10.0),
        ("CA", "GLY", "A", 2, 4.5, 0.0, 0.0, 1.0, 10.0),
        ("N", "SER", "A", 3, 20.0, 0.0, 0.0, 1.0, 10.0),
        ("CA", "SER", "A", 3, 21.5, 0.0, 0.0, 1.0, 10.0),
    ]
