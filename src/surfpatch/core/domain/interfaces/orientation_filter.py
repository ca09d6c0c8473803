"""Interface for residue orientation filters."""

from abc import ABC, abstractmethod
from typing import Dict, List

from ..models.atom import PatchAtom, ResidueKey


class OrientationFilter(ABC):
    """Abstract base class for filters run over residue representatives."""

    @abstractmethod
    def flag_representatives(
        self, representatives: List[PatchAtom], seed_residue: ResidueKey
    ) -> None:
        """
        Set or clear the flag of every representative atom.

        Args:
            representatives: One atom per residue, in sequence order
            seed_residue: Residue the patch grows from

        Raises:
            ConfigurationError: If no representative belongs to the seed residue
        """
        pass

    def compatible_residues(
        self, representatives: List[PatchAtom], seed_residue: ResidueKey
    ) -> Dict[ResidueKey, bool]:
        """
        Run the filter and map each residue to its verdict.

        The first representative of a residue decides for that residue.
        """
        self.flag_representatives(representatives, seed_residue)
        verdicts: Dict[ResidueKey, bool] = {}
        for atom in representatives:
            verdicts.setdefault(atom.residue_key, atom.is_flagged)
        return verdicts
