"""Run configuration for patch growth."""

from dataclasses import dataclass
from typing import Optional

from ..exceptions import ConfigurationError
from ...utils.centroid import DEFAULT_NEIGHBOURS

DEFAULT_RADIUS = 18.0
DEFAULT_TOLERANCE = 0.2
DEFAULT_RING_TOLERANCE = 1.0
DEFAULT_MIN_ACCESS = 0.0
DEFAULT_REPRESENTATIVE_ATOM = "CA"


@dataclass
class PatchParameters:
    """
    Parameters consumed by the patch service.

    Attributes:
        radius: Atoms must lie closer than this to the seed atom (Angstroms)
        tolerance: Added to the radius sum in the contact test; None selects
            the default for the chosen mode
        min_access: Atoms must be more accessible than this
        ring_only: Only grow into residues contacting the seed residue
        solvent_vector: Apply the solvent vector orientation filter
        representative_atom: Atom name representing a residue in the filter
        neighbours: Neighbour count used for solvent vector centroids
    """

    radius: float = DEFAULT_RADIUS
    tolerance: Optional[float] = None
    min_access: float = DEFAULT_MIN_ACCESS
    ring_only: bool = False
    solvent_vector: bool = True
    representative_atom: str = DEFAULT_REPRESENTATIVE_ATOM
    neighbours: int = DEFAULT_NEIGHBOURS

    def __post_init__(self):
        if self.radius < 0:
            raise ConfigurationError(f"Radius must not be negative, got {self.radius}")
        if self.tolerance is not None and self.tolerance < 0:
            raise ConfigurationError(
                f"Tolerance must not be negative, got {self.tolerance}"
            )
        if self.neighbours < 1:
            raise ConfigurationError(
                f"Neighbour count must be at least 1, got {self.neighbours}"
            )
        self.representative_atom = self.representative_atom.strip()

    @property
    def effective_tolerance(self) -> float:
        """Tolerance in use, 1.0 for ring-only runs unless one was given."""
        if self.tolerance is not None:
            return self.tolerance
        return DEFAULT_RING_TOLERANCE if self.ring_only else DEFAULT_TOLERANCE
