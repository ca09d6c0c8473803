import numpy as np
import pytest

from surfpatch.core.domain.models.atom import InclusionFlag, ResidueKey
from surfpatch.core.domain.models.patch_parameters import PatchParameters
from surfpatch.core.services.patch_growth_service import PatchGrowthService


def _flags(structure):
    return [atom.is_flagged for atom in structure.atoms]


def test_neighbour_in_contact_is_flagged_and_far_atom_is_not(make_atom, make_structure):
    structure = make_structure([
        make_atom(0.0, residue_id=1, radius=2.5),
        make_atom(5.0, residue_id=2, radius=2.5),
        make_atom(25.0, residue_id=3, radius=30.0),
    ])
    growth = PatchGrowthService(radius=18.0, tolerance=0.2, min_access=0.0)

    passes = growth.grow(structure, 0)

    assert _flags(structure) == [True, True, False]
    assert passes == 2


def test_atoms_out_of_contact_are_not_flagged(make_atom, make_structure):
    structure = make_structure([
        make_atom(0.0, residue_id=1, radius=2.0),
        make_atom(5.0, residue_id=2, radius=2.0),
    ])

    PatchGrowthService(radius=18.0, tolerance=0.2).grow(structure, 0)

    assert _flags(structure) == [True, False]


def test_minimum_accessibility_is_exclusive(make_atom, make_structure):
    structure = make_structure([
        make_atom(0.0, residue_id=1, accessibility=0.0),
        make_atom(1.5, residue_id=2, accessibility=4.9),
        make_atom(0.0, 1.5, residue_id=3, accessibility=5.0),
        make_atom(0.0, 0.0, 1.5, residue_id=4, accessibility=5.1),
    ])

    PatchGrowthService(radius=18.0, tolerance=0.2, min_access=5.0).grow(structure, 0)

    assert _flags(structure) == [True, False, False, True]


def test_growth_chains_through_flagged_atoms(make_atom, make_structure):
    structure = make_structure([
        make_atom(0.0, residue_id=1, radius=1.6),
        make_atom(3.0, residue_id=2, radius=1.6),
        make_atom(6.0, residue_id=3, radius=1.6),
        make_atom(9.0, residue_id=4, radius=1.6),
    ])

    passes = PatchGrowthService(radius=18.0, tolerance=0.2).grow(structure, 0)

    assert all(_flags(structure))
    # Atoms flagged earlier in a pass extend the patch within the same pass
    assert passes == 2


def test_flags_set_in_a_pass_are_used_later_in_that_pass_only(make_atom, make_structure):
    structure = make_structure([
        make_atom(9.0, residue_id=4, radius=1.6),
        make_atom(6.0, residue_id=3, radius=1.6),
        make_atom(3.0, residue_id=2, radius=1.6),
        make_atom(0.0, residue_id=1, radius=1.6),
    ])
    growth = PatchGrowthService(radius=18.0, tolerance=0.2)

    snapshots = list(growth.iter_passes(structure, 3))

    assert [snapshot.tolist() for snapshot in snapshots] == [
        [False, False, True, True],
        [False, True, True, True],
        [True, True, True, True],
        [True, True, True, True],
    ]


def test_growth_is_monotonic_and_terminates(make_atom, make_structure):
    rng = np.random.RandomState(0)
    points = rng.uniform(-12.0, 12.0, size=(80, 3))
    accessibilities = rng.uniform(0.0, 20.0, size=80)
    structure = make_structure([
        make_atom(*point, residue_id=index // 4 + 1, accessibility=access, radius=1.8)
        for index, (point, access) in enumerate(zip(points, accessibilities))
    ])
    growth = PatchGrowthService(radius=15.0, tolerance=0.2, min_access=2.0)

    snapshots = list(growth.iter_passes(structure, 0))

    assert 1 <= len(snapshots) <= len(structure)
    for before, after in zip(snapshots, snapshots[1:]):
        assert np.all(after[before])
    assert len(snapshots) == 1 or np.array_equal(snapshots[-1], snapshots[-2])
    assert np.array_equal(snapshots[-1], structure.flagged_mask())


def test_seed_starts_flagged_and_old_flags_are_cleared(make_atom, make_structure):
    structure = make_structure([
        make_atom(0.0, residue_id=1, accessibility=0.0),
        make_atom(50.0, residue_id=2),
    ])
    structure.atoms[1].flag = InclusionFlag.SET

    passes = PatchGrowthService(radius=18.0, tolerance=0.2).grow(structure, 0)

    assert _flags(structure) == [True, False]
    assert passes == 1


@pytest.fixture
def ring_structure(make_atom, make_structure):
    """Seed residue 1, residue 2 touching it and residue 3 touching only 2."""
    return make_structure([
        make_atom(0.0, residue_id=1, atom_name="CA"),
        make_atom(2.8, residue_id=2, atom_name="CA"),
        make_atom(2.8, 2.8, residue_id=2, atom_name="CB"),
        make_atom(5.6, residue_id=3, atom_name="CA"),
    ])


def test_ring_only_stops_at_residues_touching_the_seed_residue(ring_structure):
    parameters = PatchParameters(ring_only=True)
    assert parameters.effective_tolerance == 1.0
    growth = PatchGrowthService(
        radius=parameters.radius,
        tolerance=parameters.effective_tolerance,
        ring_only=True,
    )

    growth.grow(ring_structure, 0)

    # CB is reached through CA of its own residue, residue 3 is two hops away
    assert _flags(ring_structure) == [True, True, True, False]


def test_without_ring_only_growth_continues(ring_structure):
    PatchGrowthService(radius=18.0, tolerance=1.0).grow(ring_structure, 0)

    assert _flags(ring_structure) == [True, True, True, True]


def test_orientation_verdicts_gate_growth(ring_structure):
    verdicts = {
        ResidueKey("A", 1): True,
        ResidueKey("A", 2): False,
        ResidueKey("A", 3): True,
    }

    PatchGrowthService(radius=18.0, tolerance=1.0).grow(ring_structure, 0, verdicts)

    assert _flags(ring_structure) == [True, False, False, False]


def test_residue_without_representative_is_never_added(ring_structure):
    verdicts = {ResidueKey("A", 1): True, ResidueKey("A", 3): True}

    PatchGrowthService(radius=18.0, tolerance=1.0).grow(ring_structure, 0, verdicts)

    assert _flags(ring_structure) == [True, False, False, False]
