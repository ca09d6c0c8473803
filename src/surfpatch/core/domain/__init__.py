"""Core domain models and interfaces."""

from .models.atom import InclusionFlag, PatchAtom, ResidueKey
from .models.structure import PatchStructure, Residue
from .models.residue_spec import ResidueSpec
from .interfaces.orientation_filter import OrientationFilter

__all__ = [
    "InclusionFlag",
    "PatchAtom",
    "ResidueKey",
    "PatchStructure",
    "Residue",
    "ResidueSpec",
    "OrientationFilter",
]
