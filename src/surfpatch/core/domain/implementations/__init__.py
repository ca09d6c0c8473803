"""Strategy implementations."""

from .solvent_vector_filter import SolventVectorFilter

__all__ = ["SolventVectorFilter"]
