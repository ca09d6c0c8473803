"""Domain model for the outcome of one patch run."""

from dataclasses import dataclass
from typing import List

from .atom import ResidueKey


@dataclass
class PatchResult:
    """Contains results from growing one patch."""

    seed: str
    seed_atom_index: int
    residues: List[ResidueKey]
    flagged_atoms: int
    passes: int

    def summary_line(self) -> str:
        """One-line listing of the patch, e.g. ``<patch A23> A:22 A:23``."""
        return " ".join([f"<patch {self.seed}>"] + [str(key) for key in self.residues])
