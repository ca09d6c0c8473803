"""Surface patch growth around a seed atom of a biomolecular structure."""

from .core.domain.exceptions import ConfigurationError, StructureReadError, SurfPatchError
from .core.domain.models.patch_parameters import PatchParameters
from .core.domain.models.patch_result import PatchResult
from .core.domain.models.structure import PatchStructure
from .core.services.patch_service import PatchService
from .infrastructure.repositories.structure_repository import StructureRepository

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "StructureReadError",
    "SurfPatchError",
    "PatchParameters",
    "PatchResult",
    "PatchStructure",
    "PatchService",
    "StructureRepository",
]
