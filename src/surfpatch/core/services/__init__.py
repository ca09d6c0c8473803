"""Core business logic services."""

from .patch_growth_service import PatchGrowthService
from .patch_service import PatchService

__all__ = [
    "PatchGrowthService",
    "PatchService",
]
