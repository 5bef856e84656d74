#!/usr/bin/env python3
# src/laurel/core/domain/models/structure.py

"""
Domain model representing one snapshot of a molecular system.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

import numpy as np

from .atom import AtomRecord
from .box_vectors import BoxVectors


@dataclass
class Structure:
    """Title, ordered atom records and periodic cell of a .gro file."""

    title: str
    atoms: List[AtomRecord] = field(default_factory=list)
    box_vectors: BoxVectors = field(default_factory=BoxVectors)

    @classmethod
    def decode(cls, text: str) -> "Structure":
        """Build a structure from the text of a .gro file."""
        from ....io.gro_decoder import decode_gro

        return decode_gro(text)

    def __len__(self) -> int:
        return self.atom_count()

    def __iter__(self) -> Iterator[AtomRecord]:
        return iter(self.atoms)

    def atom_count(self) -> int:
        """Return the number of atoms in the structure."""
        return len(self.atoms)

    def positions(self) -> np.ndarray:
        """Get positions of all atoms.

        Returns:
            float32 array of shape (n_atoms, 3) in nm
        """
        if not self.atoms:
            return np.zeros((0, 3), dtype=np.float32)
        return np.array([atom.position for atom in self.atoms], dtype=np.float32)

    def center(self) -> np.ndarray:
        """
        Return the average position of all atoms.

        Every atom is weighed equally, so this is not the center of mass.
        An empty structure has its center at the origin.
        """
        if not self.atoms:
            return np.zeros(3, dtype=np.float32)
        return self.positions().mean(axis=0, dtype=np.float32)

    def min_z(self) -> float:
        """Return the lowest z coordinate, or 0.0 for an empty structure."""
        if not self.atoms:
            return 0.0
        return min(atom.z for atom in self.atoms)

    def max_z(self) -> float:
        """Return the highest z coordinate, or 0.0 for an empty structure."""
        if not self.atoms:
            return 0.0
        return max(atom.z for atom in self.atoms)

    def z_extent(self) -> Tuple[float, float]:
        return self.min_z(), self.max_z()

    def depth(self, atom: AtomRecord) -> float:
        """
        Normalized depth of an atom between min_z (0.0) and max_z (1.0).

        Returns 0.0 when all atoms share the same z coordinate.
        """
        low, high = self.z_extent()
        if high <= low:
            return 0.0
        return min(max((atom.z - low) / (high - low), 0.0), 1.0)

    def center_structure(self) -> None:
        """Translate all atoms in place so that center() is the origin."""
        center = self.center()
        for index, atom in enumerate(self.atoms):
            self.atoms[index] = atom.with_position(atom.position_array() - center)
