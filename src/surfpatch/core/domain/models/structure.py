#!/usr/bin/env python3
# src/surfpatch/core/domain/models/structure.py

"""
Domain model representing the ordered atom sequence of one structure.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

import numpy as np

from .atom import InclusionFlag, PatchAtom, ResidueKey
from .residue_spec import ResidueSpec


@dataclass(frozen=True)
class Residue:
    """Contiguous run of atoms ``atoms[start:stop]`` sharing a residue key."""

    key: ResidueKey
    start: int
    stop: int

    def __len__(self) -> int:
        return self.stop - self.start


class PatchStructure:
    """Ordered atoms of a structure with residue ranges computed up front."""

    def __init__(self, atoms: List[PatchAtom], name: str = "", source: Any = None):
        """
        Initialize a PatchStructure.

        Args:
            atoms: Atoms in file order; the order is never changed
            name: Structure identifier, usually the file name
            source: Object the atoms were read from, kept for writing back
        """
        self.atoms = atoms
        self.name = name
        self.source = source
        self.residues = self._build_residues(atoms)
        self.residue_index = np.empty(len(atoms), dtype=int)
        for index, residue in enumerate(self.residues):
            self.residue_index[residue.start:residue.stop] = index

    @staticmethod
    def _build_residues(atoms: List[PatchAtom]) -> List[Residue]:
        residues = []
        start = 0
        for index in range(1, len(atoms) + 1):
            if index == len(atoms) or atoms[index].residue_key != atoms[start].residue_key:
                residues.append(Residue(atoms[start].residue_key, start, index))
                start = index
        return residues

    def __len__(self) -> int:
        return len(self.atoms)

    def __iter__(self) -> Iterator[PatchAtom]:
        return iter(self.atoms)

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        return np.array([atom.coordinates for atom in self.atoms], dtype=float).reshape(-1, 3)

    def get_radii(self) -> np.ndarray:
        return np.array([atom.radius for atom in self.atoms], dtype=float)

    def get_accessibilities(self) -> np.ndarray:
        return np.array([atom.accessibility for atom in self.atoms], dtype=float)

    def flagged_mask(self) -> np.ndarray:
        return np.array([atom.is_flagged for atom in self.atoms], dtype=bool)

    def residue_atoms(self, residue: Residue) -> List[PatchAtom]:
        return self.atoms[residue.start:residue.stop]

    def residue_of(self, atom_index: int) -> Residue:
        return self.residues[self.residue_index[atom_index]]

    def clear_flags(self) -> None:
        for atom in self.atoms:
            atom.flag = InclusionFlag.UNSET

    def select_atoms(self, atom_name: str) -> List[PatchAtom]:
        """
        Copies of every atom with the given name, in sequence order.

        Flags set on the copies do not touch the atoms of this structure.
        """
        return [
            dataclasses.replace(atom, flag=InclusionFlag.UNSET)
            for atom in self.atoms
            if atom.atom_name == atom_name
        ]

    def find_residue(self, spec: ResidueSpec) -> Optional[Residue]:
        """Return the first residue matching ``spec``, or None."""
        for residue in self.residues:
            if spec.matches(residue.key):
                return residue
        return None

    def find_atom(self, spec: ResidueSpec, atom_name: str) -> Optional[int]:
        """
        Locate an atom by residue specifier and atom name.

        Args:
            spec: Residue to search
            atom_name: Atom name, surrounding whitespace is ignored

        Returns:
            Index of the first matching atom in the first matching residue,
            or None if either is missing
        """
        residue = self.find_residue(spec)
        if residue is None:
            return None
        atom_name = atom_name.strip()
        for index in range(residue.start, residue.stop):
            if self.atoms[index].atom_name == atom_name:
                return index
        return None
