#!/usr/bin/env python3
# src/surfpatch/core/utils/centroid.py

"""
Nearest-neighbour centroid used to build solvent vectors.
"""

from typing import Sequence

import numpy as np

DEFAULT_NEIGHBOURS = 10
OTHER_CHAIN_DISTANCE = 999.99
SELF_EXCLUSION = 0.01


def distances_from_reference(
    coordinates: np.ndarray,
    chain_ids: Sequence[str],
    reference_index: int,
    other_chain_distance: float = OTHER_CHAIN_DISTANCE,
) -> np.ndarray:
    """
    Annotate every point with its distance from a reference point.

    Points outside the reference point's chain get ``other_chain_distance``
    so that they sort behind every point of the same chain.

    Args:
        coordinates: Array of shape (n, 3)
        chain_ids: Chain identifier of every point
        reference_index: Index of the reference point
        other_chain_distance: Distance assigned to points in other chains

    Returns:
        Array of shape (n,) with the annotated distances
    """
    coordinates = np.asarray(coordinates, dtype=float)
    if len(chain_ids) != len(coordinates):
        raise ValueError("Need one chain identifier per coordinate")

    deltas = coordinates - coordinates[reference_index]
    distances = np.sqrt(np.einsum("ij,ij->i", deltas, deltas))
    reference_chain = chain_ids[reference_index]
    same_chain = np.array([chain == reference_chain for chain in chain_ids], dtype=bool)
    distances[~same_chain] = other_chain_distance
    return distances


def nearest_neighbour_centroid(
    coordinates: np.ndarray,
    distances: np.ndarray,
    neighbours: int = DEFAULT_NEIGHBOURS,
    exclusion: float = SELF_EXCLUSION,
) -> np.ndarray:
    """
    Centroid of the ``neighbours`` points closest to a reference point.

    Points whose annotated distance lies within ``exclusion`` of zero are
    skipped; this removes the reference point itself. The coordinate sum is
    always divided by ``neighbours``, also when fewer qualifying points exist,
    so a short neighbour list pulls the centroid towards the origin.

    Args:
        coordinates: Array of shape (n, 3)
        distances: Distance of each point from the reference, shape (n,)
        neighbours: Number of neighbours to average over
        exclusion: Half-width of the band around zero treated as the reference

    Returns:
        Centroid as an array of shape (3,)
    """
    coordinates = np.asarray(coordinates, dtype=float).reshape(-1, 3)
    distances = np.asarray(distances, dtype=float)
    if len(distances) != len(coordinates):
        raise ValueError("Need one distance per coordinate")

    # Stable sort keeps ties in sequence order
    order = np.argsort(distances, kind="stable")
    keep = order[np.abs(distances[order]) >= exclusion][:neighbours]
    return coordinates[keep].sum(axis=0) / neighbours
