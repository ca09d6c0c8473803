# src/surfpatch/infrastructure/repositories/structure_repository.py
"""Repository reading and writing structures with Biopython."""

import logging
import os
from typing import IO, List, Optional, Union

from Bio.PDB.MMCIFParser import MMCIFParser
from Bio.PDB.PDBExceptions import PDBConstructionException
from Bio.PDB.PDBIO import PDBIO
from Bio.PDB.PDBParser import PDBParser
from Bio.PDB.mmcifio import MMCIFIO

from ...core.domain.exceptions import StructureReadError
from ...core.domain.models.atom import PatchAtom
from ...core.domain.models.structure import PatchStructure

logger = logging.getLogger(__name__)

FORMATS = ("pdb", "cif")
_CIF_SUFFIXES = (".cif", ".mmcif")

Source = Union[str, IO[str]]


class StructureRepository:
    """
    Repository for reading structures into PatchStructure and back out.

    Input files carry solvent accessibility in the B-factor column and the
    contact radius of each atom in the occupancy column.
    """

    def __init__(self):
        self._parsers = {
            "pdb": PDBParser(QUIET=True),
            "cif": MMCIFParser(QUIET=True),
        }

    @staticmethod
    def detect_format(path: Optional[str], default: str = "pdb") -> str:
        """Choose the file format from a file name suffix."""
        if path and path.lower().endswith(_CIF_SUFFIXES):
            return "cif"
        return default

    def get(self, source: Source, file_format: Optional[str] = None) -> PatchStructure:
        """
        Read the first model of a structure.

        Args:
            source: File path or open text handle
            file_format: "pdb" or "cif"; guessed from the path when omitted

        Returns:
            PatchStructure holding the atoms in file order

        Raises:
            StructureReadError: If the file can't be parsed or has no atoms
        """
        path = source if isinstance(source, str) else getattr(source, "name", None)
        file_format = file_format or self.detect_format(path)
        if file_format not in self._parsers:
            raise ValueError(f"Unsupported format: {file_format}")
        name = os.path.splitext(os.path.basename(path))[0] if path else "structure"

        try:
            full_structure = self._parsers[file_format].get_structure(name, source)
        except (OSError, ValueError, PDBConstructionException) as error:
            raise StructureReadError(f"Cannot read structure from {path}: {error}") from error

        if len(full_structure) == 0:
            raise StructureReadError("No atoms read from structure file")
        model = full_structure.child_list[0]

        atoms = []
        for chain in model:
            for residue in chain:
                for atom in residue:
                    atoms.append(self._create_patch_atom(atom, residue, chain, len(atoms)))
        if not atoms:
            raise StructureReadError("No atoms read from structure file")
        atoms = self._in_file_order(atoms)

        logger.info("Read %d atoms from %s", len(atoms), path or "standard input")
        return PatchStructure(atoms, name=name, source=model)

    def save(
        self,
        structure: PatchStructure,
        destination: Source,
        file_format: str = "pdb",
    ) -> None:
        """
        Write a structure read by this repository.

        The occupancy and B-factor columns receive the output radius and
        output accessibility of each atom where these have been set. Records
        are written in chain order by Biopython, so a chain split across the
        input file is written as one block.
        """
        if structure.source is None:
            raise ValueError("Structure was not read by a StructureRepository")

        for atom in structure.atoms:
            self._apply_output_fields(atom)

        if file_format == "cif":
            writer = MMCIFIO()
        elif file_format == "pdb":
            writer = PDBIO()
        else:
            raise ValueError(f"Unsupported format: {file_format}")
        writer.set_structure(structure.source)
        writer.save(destination)

    @staticmethod
    def _in_file_order(atoms: List[PatchAtom]) -> List[PatchAtom]:
        """
        Restore file order from the atom serial numbers.

        Biopython groups every record of a chain under the chain it created
        first, so a chain split across the file comes out regrouped. Serials
        that repeat (wrapped or missing numbering) leave the hierarchy order
        in place.
        """
        serials = [atom.atom_id for atom in atoms]
        if len(set(serials)) != len(serials):
            logger.warning(
                "Atom serial numbers are not unique, keeping chain order of the reader"
            )
            return atoms
        return sorted(atoms, key=lambda atom: atom.atom_id)

    @staticmethod
    def _create_patch_atom(atom, residue, chain, index: int) -> PatchAtom:
        """Convert a Biopython atom to PatchAtom."""
        occupancy = atom.get_occupancy()
        serial = atom.get_serial_number()
        _, residue_number, insertion_code = residue.get_id()
        return PatchAtom(
            atom_id=serial if serial is not None else index + 1,
            atom_name=atom.get_name(),
            coordinates=tuple(float(value) for value in atom.get_coord()),
            residue_name=residue.get_resname(),
            residue_id=residue_number,
            chain_id=chain.id,
            insertion_code=insertion_code.strip(),
            element=atom.element or "",
            accessibility=float(atom.get_bfactor()),
            radius=float(occupancy) if occupancy is not None else 0.0,
            source_atom=atom,
        )

    @staticmethod
    def _apply_output_fields(atom: PatchAtom) -> None:
        source = atom.source_atom
        if source is None:
            return
        # All alternate locations carry the same output
        targets = source.disordered_get_list() if source.is_disordered() else [source]
        for target in targets:
            if atom.output_radius is not None:
                target.set_occupancy(atom.output_radius)
            if atom.output_accessibility is not None:
                target.set_bfactor(atom.output_accessibility)
