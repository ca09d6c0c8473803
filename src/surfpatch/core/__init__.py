"""Core domain models, interfaces and services for surface patch growth."""

from .domain.models.atom import InclusionFlag, PatchAtom, ResidueKey
from .domain.models.structure import PatchStructure, Residue
from .domain.models.patch_parameters import PatchParameters
from .domain.models.patch_result import PatchResult
from .domain.interfaces.orientation_filter import OrientationFilter
from .services.patch_growth_service import PatchGrowthService
from .services.patch_service import PatchService

__all__ = [
    "InclusionFlag",
    "PatchAtom",
    "ResidueKey",
    "PatchStructure",
    "Residue",
    "PatchParameters",
    "PatchResult",
    "OrientationFilter",
    "PatchGrowthService",
    "PatchService",
]
