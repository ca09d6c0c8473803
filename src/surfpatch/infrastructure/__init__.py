"""Infrastructure implementations backed by external libraries."""

from .repositories.structure_repository import StructureRepository

__all__ = ["StructureRepository"]
