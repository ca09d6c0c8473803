"""Orientation filter comparing solvent vectors with the seed residue."""

import logging
from typing import List, Optional

import numpy as np
from tqdm import tqdm

from ..exceptions import ConfigurationError, DegenerateGeometryError
from ..interfaces.orientation_filter import OrientationFilter
from ..models.atom import PatchAtom, ResidueKey
from ...utils.centroid import (
    DEFAULT_NEIGHBOURS,
    distances_from_reference,
    nearest_neighbour_centroid,
)
from ...utils.geometry import ORIENTATION_COSINE_LIMIT, subtract, vector_angle_compatible

logger = logging.getLogger(__name__)


class SolventVectorFilter(OrientationFilter):
    """
    Keep residues whose solvent vector lies within 120 degrees of the seed's.

    A residue's solvent vector runs from its representative atom to the
    centroid of the nearest representatives of its own chain. Residues facing
    away from the seed residue's direction are cleared.
    """

    def __init__(
        self,
        neighbours: int = DEFAULT_NEIGHBOURS,
        cosine_limit: float = ORIENTATION_COSINE_LIMIT,
        show_progress: bool = False,
    ):
        """
        Initialize the filter.

        Args:
            neighbours: Representatives averaged for each centroid
            cosine_limit: Cosines at or below this value are rejected
            show_progress: Display a progress bar over the representatives
        """
        self._neighbours = neighbours
        self._cosine_limit = cosine_limit
        self._show_progress = show_progress

    def solvent_vector(
        self, coordinates: np.ndarray, chain_ids: List[str], index: int
    ) -> np.ndarray:
        """Vector from representative ``index`` to its neighbour centroid."""
        distances = distances_from_reference(coordinates, chain_ids, index)
        centroid = nearest_neighbour_centroid(coordinates, distances, self._neighbours)
        return subtract(centroid, coordinates[index])

    def flag_representatives(
        self, representatives: List[PatchAtom], seed_residue: ResidueKey
    ) -> None:
        seed_index = self._find_seed(representatives, seed_residue)
        if seed_index is None:
            raise ConfigurationError(
                f"Couldn't find residue {seed_residue} among "
                f"{len(representatives)} representative atoms"
            )

        coordinates = np.array(
            [atom.coordinates for atom in representatives], dtype=float
        ).reshape(-1, 3)
        chain_ids = [atom.chain_id for atom in representatives]
        seed_vector = self.solvent_vector(coordinates, chain_ids, seed_index)
        if not seed_vector.any():
            logger.warning(
                "Zero length solvent vector for seed residue %s, no residue "
                "passes the orientation test",
                seed_residue,
            )
            for atom in representatives:
                atom.clear_flag()
            return

        for index, atom in enumerate(
            tqdm(
                representatives,
                desc="Solvent vectors",
                unit="residue",
                disable=not self._show_progress,
            )
        ):
            vector = self.solvent_vector(coordinates, chain_ids, index)
            if self._compatible(seed_vector, vector, atom):
                atom.set_flag()
            else:
                atom.clear_flag()
                logger.debug(
                    "Residue %s was eliminated by the solvent vector test",
                    atom.residue_key,
                )

        kept = sum(atom.is_flagged for atom in representatives)
        logger.info(
            "Solvent vector filter kept %d of %d residues", kept, len(representatives)
        )

    def _compatible(
        self, seed_vector: np.ndarray, vector: np.ndarray, atom: PatchAtom
    ) -> bool:
        try:
            return vector_angle_compatible(seed_vector, vector, self._cosine_limit)
        except DegenerateGeometryError:
            logger.warning(
                "Zero length solvent vector for residue %s, treating it as "
                "facing away",
                atom.residue_key,
            )
            return False

    @staticmethod
    def _find_seed(
        representatives: List[PatchAtom], seed_residue: ResidueKey
    ) -> Optional[int]:
        for index, atom in enumerate(representatives):
            if atom.residue_key == seed_residue:
                return index
        return None
