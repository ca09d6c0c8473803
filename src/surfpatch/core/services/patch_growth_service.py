"""Service growing a patch outward from a seed atom."""

import logging
from typing import Dict, Iterator, Optional

import numpy as np

from ..domain.models.atom import ResidueKey
from ..domain.models.structure import PatchStructure

logger = logging.getLogger(__name__)


class PatchGrowthService:
    """
    Flood fill over atom contacts, repeated until a pass adds nothing.

    An unflagged atom Q joins the patch when it is more accessible than
    ``min_access``, lies within ``radius`` of the seed, touches a flagged atom
    P (distance below the radius sum plus ``tolerance``), satisfies the
    ring-only restriction if requested and belongs to a residue accepted by
    the orientation filter.

    Flags set during a pass are visible straight away: an atom flagged while
    scanning P can act as P itself later in the same pass.
    """

    def __init__(
        self,
        radius: float,
        tolerance: float,
        min_access: float = 0.0,
        ring_only: bool = False,
    ):
        """
        Initialize the growth engine.

        Args:
            radius: Inclusion radius around the seed atom
            tolerance: Added to the per-atom radius sum in the contact test
            min_access: Minimum accessibility (exclusive)
            ring_only: Only admit contacts made from the seed residue or
                within the candidate's own residue
        """
        self._radius = radius
        self._tolerance = tolerance
        self._min_access = min_access
        self._ring_only = ring_only

    def grow(
        self,
        structure: PatchStructure,
        seed_index: int,
        compatible_residues: Optional[Dict[ResidueKey, bool]] = None,
    ) -> int:
        """
        Grow the patch to its fixed point.

        Args:
            structure: Structure whose atom flags are updated in place
            seed_index: Index of the seed atom
            compatible_residues: Orientation verdict per residue, or None to
                skip the orientation test

        Returns:
            Number of passes made, including the final pass that added nothing
        """
        passes = 0
        for _ in self.iter_passes(structure, seed_index, compatible_residues):
            passes += 1
        return passes

    def iter_passes(
        self,
        structure: PatchStructure,
        seed_index: int,
        compatible_residues: Optional[Dict[ResidueKey, bool]] = None,
    ) -> Iterator[np.ndarray]:
        """
        Grow the patch, yielding a copy of the flag mask after each pass.

        Atom flags in ``structure`` are brought up to date before each yield.
        """
        atoms = structure.atoms
        coordinates = structure.get_coordinates()
        radii = structure.get_radii()
        residue_index = structure.residue_index
        seed_residue = residue_index[seed_index]

        eligible = self._eligible(structure, seed_index, coordinates, compatible_residues)

        structure.clear_flags()
        atoms[seed_index].set_flag()
        flagged = np.zeros(len(atoms), dtype=bool)
        flagged[seed_index] = True

        changed = True
        while changed:
            changed = False
            before = flagged.copy()
            for p in range(len(atoms)):
                # Live state: atoms flagged earlier in this pass count as P
                if not flagged[p]:
                    continue
                candidates = eligible & ~flagged
                if self._ring_only and residue_index[p] != seed_residue:
                    candidates &= residue_index == residue_index[p]
                candidate_indices = np.flatnonzero(candidates)
                if candidate_indices.size == 0:
                    continue

                deltas = coordinates[candidate_indices] - coordinates[p]
                distance_sq = np.einsum("ij,ij->i", deltas, deltas)
                reach = radii[p] + radii[candidate_indices] + self._tolerance
                touching = candidate_indices[distance_sq < reach * reach]
                if touching.size:
                    flagged[touching] = True
                    changed = True

            added = np.flatnonzero(flagged & ~before)
            for index in added:
                atoms[index].set_flag()
            logger.debug("Growth pass added %d atoms", added.size)
            yield flagged.copy()

    def _eligible(
        self,
        structure: PatchStructure,
        seed_index: int,
        coordinates: np.ndarray,
        compatible_residues: Optional[Dict[ResidueKey, bool]],
    ) -> np.ndarray:
        """Atoms passing every test that does not depend on a partner atom."""
        deltas = coordinates - coordinates[seed_index]
        seed_distance_sq = np.einsum("ij,ij->i", deltas, deltas)
        eligible = (structure.get_accessibilities() > self._min_access) & (
            seed_distance_sq < self._radius * self._radius
        )
        if compatible_residues is not None:
            # Residues without a representative never pass
            eligible &= np.array(
                [
                    compatible_residues.get(atom.residue_key, False)
                    for atom in structure.atoms
                ],
                dtype=bool,
            )
        return eligible
