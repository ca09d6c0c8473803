#!/usr/bin/env python3
# src/surfpatch/core/domain/models/atom.py

"""
Domain model representing an atom taking part in patch growth.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, NamedTuple, Optional, Tuple


class InclusionFlag(Enum):
    """Membership marker of an atom."""

    UNSET = auto()
    SET = auto()
    CLEARED = auto()


class ResidueKey(NamedTuple):
    """Identity of a residue: chain, sequence number and insertion code."""

    chain_id: str
    residue_id: int
    insertion_code: str = ""

    def __str__(self) -> str:
        return f"{self.chain_id}:{self.residue_id}{self.insertion_code}"


@dataclass
class PatchAtom:
    """
    Represents an atom of the input structure.

    ``accessibility`` and ``radius`` are the inputs read from the B-factor
    and occupancy columns. ``output_accessibility`` and ``output_radius`` are
    only filled in by the cleanup step and replace those columns on output.
    """

    atom_id: int
    atom_name: str
    coordinates: Tuple[float, float, float]
    residue_name: str = ""
    residue_id: int = 0
    chain_id: str = "A"
    insertion_code: str = ""
    element: str = ""
    accessibility: float = 0.0
    radius: float = 0.0
    flag: InclusionFlag = InclusionFlag.UNSET
    output_accessibility: Optional[float] = None
    output_radius: Optional[float] = None
    source_atom: Any = field(default=None, repr=False, compare=False)

    @property
    def residue_key(self) -> ResidueKey:
        return ResidueKey(self.chain_id, self.residue_id, self.insertion_code)

    @property
    def is_flagged(self) -> bool:
        return self.flag is InclusionFlag.SET

    def set_flag(self) -> None:
        self.flag = InclusionFlag.SET

    def clear_flag(self) -> None:
        self.flag = InclusionFlag.CLEARED
