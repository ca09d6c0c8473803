"""Service building a surface patch around a seed atom."""

import logging
from typing import List, Optional, Union

from ..domain.exceptions import ConfigurationError
from ..domain.interfaces.orientation_filter import OrientationFilter
from ..domain.models.atom import ResidueKey
from ..domain.models.patch_parameters import PatchParameters
from ..domain.models.patch_result import PatchResult
from ..domain.models.residue_spec import ResidueSpec
from ..domain.models.structure import PatchStructure
from .patch_growth_service import PatchGrowthService

logger = logging.getLogger(__name__)

OUTPUT_RADIUS = 1.0
OUTPUT_IN_PATCH = 1.0
OUTPUT_NOT_IN_PATCH = 0.0


class PatchService:
    """Service for growing, extending and reporting surface patches."""

    def __init__(
        self,
        parameters: Optional[PatchParameters] = None,
        orientation_filter: Optional[OrientationFilter] = None,
        show_progress: bool = False,
    ):
        """
        Initialize service with run parameters and orientation strategy.

        When no filter is given and ``parameters.solvent_vector`` is set, a
        SolventVectorFilter using ``parameters.neighbours`` is created.
        """
        from ..domain.implementations.solvent_vector_filter import SolventVectorFilter

        self._parameters = parameters or PatchParameters()
        if not self._parameters.solvent_vector:
            orientation_filter = None
        elif orientation_filter is None:
            orientation_filter = SolventVectorFilter(
                neighbours=self._parameters.neighbours, show_progress=show_progress
            )
        self._orientation_filter = orientation_filter
        self._growth = PatchGrowthService(
            radius=self._parameters.radius,
            tolerance=self._parameters.effective_tolerance,
            min_access=self._parameters.min_access,
            ring_only=self._parameters.ring_only,
        )

    @property
    def parameters(self) -> PatchParameters:
        return self._parameters

    def make_patch(
        self,
        structure: PatchStructure,
        seed: Union[str, ResidueSpec],
        atom_name: str,
    ) -> PatchResult:
        """
        Grow a patch from a seed atom and write the output fields.

        The seed is located before anything is changed, so a configuration
        error leaves the structure as it was read.

        Args:
            structure: Structure to process in place
            seed: Residue specifier of the seed residue
            atom_name: Name of the seed atom within that residue

        Returns:
            PatchResult describing the patch

        Raises:
            ConfigurationError: If the seed residue, seed atom or the seed
                residue's representative atom is missing
        """
        spec = seed if isinstance(seed, ResidueSpec) else ResidueSpec.parse(seed)
        seed_index = structure.find_atom(spec, atom_name)
        if seed_index is None:
            raise ConfigurationError(
                f"Couldn't find Residue {spec} Atom {atom_name.strip()}"
            )
        seed_atom = structure.atoms[seed_index]
        logger.info(
            "Growing patch from %s atom %s (radius %.2f, tolerance %.2f)",
            seed_atom.residue_key,
            seed_atom.atom_name,
            self._parameters.radius,
            self._parameters.effective_tolerance,
        )

        compatible = None
        if self._orientation_filter is not None:
            representatives = structure.select_atoms(self._parameters.representative_atom)
            compatible = self._orientation_filter.compatible_residues(
                representatives, seed_atom.residue_key
            )

        passes = self._growth.grow(structure, seed_index, compatible)
        self.extend_to_whole_residues(structure)
        flagged_atoms = int(structure.flagged_mask().sum())
        self.clean_up(structure)
        residues = self.patch_residues(structure)
        logger.info(
            "Patch contains %d atoms in %d residues after %d passes",
            flagged_atoms,
            len(residues),
            passes,
        )

        return PatchResult(
            seed=str(spec),
            seed_atom_index=seed_index,
            residues=residues,
            flagged_atoms=flagged_atoms,
            passes=passes,
        )

    @staticmethod
    def extend_to_whole_residues(structure: PatchStructure) -> None:
        """Flag every atom of each residue that has a flagged atom."""
        for residue in structure.residues:
            atoms = structure.residue_atoms(residue)
            if any(atom.is_flagged for atom in atoms):
                for atom in atoms:
                    atom.set_flag()

    @staticmethod
    def clean_up(structure: PatchStructure) -> None:
        """
        Write the output fields and drop the flags.

        Every atom gets an output radius of 1.0 and an output accessibility of
        1.0 inside the patch or 0.0 outside it.
        """
        for atom in structure.atoms:
            atom.output_radius = OUTPUT_RADIUS
            atom.output_accessibility = (
                OUTPUT_IN_PATCH if atom.is_flagged else OUTPUT_NOT_IN_PATCH
            )
        structure.clear_flags()

    @staticmethod
    def patch_residues(structure: PatchStructure) -> List[ResidueKey]:
        """Distinct residues marked as in the patch, in sequence order."""
        residues: List[ResidueKey] = []
        for residue in structure.residues:
            first = structure.atoms[residue.start]
            if first.output_accessibility == OUTPUT_IN_PATCH and residue.key not in residues:
                residues.append(residue.key)
        return residues
