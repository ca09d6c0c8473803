"""Domain model classes."""

from .atom import InclusionFlag, PatchAtom, ResidueKey
from .residue_spec import ResidueSpec
from .structure import PatchStructure, Residue
from .patch_parameters import PatchParameters
from .patch_result import PatchResult

__all__ = [
    "InclusionFlag",
    "PatchAtom",
    "ResidueKey",
    "ResidueSpec",
    "PatchStructure",
    "Residue",
    "PatchParameters",
    "PatchResult",
]
